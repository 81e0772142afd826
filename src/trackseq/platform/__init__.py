"""Infrastructure shared across trackseq layers."""
