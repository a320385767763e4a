class MissingCapabilityException(Exception):
    pass
