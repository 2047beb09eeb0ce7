"""Frame transformations and the Earth orientation data correcting them."""
