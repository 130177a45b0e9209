"""Infrastructure: persistence adapters implementing application ports."""
