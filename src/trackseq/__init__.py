"""trackseq: number MP3 files in natural filename order via their ID3 tags."""

__version__ = "0.1.0"
