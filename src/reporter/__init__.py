"""Command-line reporter for the training catalog."""
