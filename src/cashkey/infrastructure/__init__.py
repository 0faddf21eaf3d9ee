"""Infrastructure: the address-bar state codec."""
