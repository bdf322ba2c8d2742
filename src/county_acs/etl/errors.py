class CensusPipelineError(Exception):
    """Base exception for county ACS pipeline failures."""
class InvalidVariableCode(CensusPipelineError):
    """Raised when a variable code does not exist for the requested dataset/vintage."""
class AuthenticationError(CensusPipelineError):
    """Raised when no valid Census API key is configured."""
class UpstreamUnavailable(CensusPipelineError):
    """Raised for transport failures and unexpected Census API responses."""
class WriteError(CensusPipelineError):
    """Raised when an output artifact cannot be written."""
class DivisionUndefined(UserWarning):
    """Warned when a percentage has a zero denominator and is left null."""
