"""Navigation, classification and dispatch for the tweaks menu."""
