# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_USAGE = 64  # Bad command line arguments
EXIT_DATAERR = 65  # Input data was invalid (e.g., malformed stats file)
EXIT_NOINPUT = 66  # Input file not found (e.g., stats.json missing)
EXIT_CANTCREAT = 73  # Output file could not be written
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad pyproject.toml)
