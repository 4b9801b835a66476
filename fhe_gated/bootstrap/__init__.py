"""Bootstrap wiring: lazily constructed service singletons and logging setup."""
