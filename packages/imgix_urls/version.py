__version__ = "0.1.0"

# Client identifier sent in the informational `ixlib` parameter.
LIB_CLIENT = "python"
