"""Pure domain services: storage codec and browsing filters."""
