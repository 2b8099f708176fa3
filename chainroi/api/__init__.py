"""evaluate() entry point and the Flask app that serves it."""
