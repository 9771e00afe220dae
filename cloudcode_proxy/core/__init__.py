"""Core building blocks shared by the conversion and envelope layers."""
