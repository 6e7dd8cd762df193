"""Entity descriptions for the wake-up light integration."""
