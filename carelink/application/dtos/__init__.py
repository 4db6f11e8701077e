"""Commands and response models exchanged with use cases."""
