"""Configuration, URL and value types shared by the client shell."""
