"""Command-line interface for the metrics forwarder."""
