"""Batch job compressing PDF assets referenced from lesson plans."""
