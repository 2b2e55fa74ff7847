"""Filesystem infrastructure used by the generation use-cases."""
