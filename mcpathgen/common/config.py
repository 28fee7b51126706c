# mcpathgen/common/config.py

import os

# General project config
PROJECT_NAME = "mcpathgen"

# Simulation defaults
DEFAULT_RANDOM_SEED = 42
DEFAULT_GENERATION_SCHEME = os.getenv("MCPATHGEN_SCHEME", "drift_diffusion")
SOBOL_BATCH_SIZE = int(os.getenv("MCPATHGEN_SOBOL_BATCH", "1024"))
SOBOL_MAX_DIMENSION = 21201

# Implied volatility search bounds
MIN_VOLATILITY = 1e-4
MAX_VOLATILITY = 4.0

# Relative bumps for finite-difference Greeks
VOL_BUMP = 1e-4
RATE_BUMP = 1e-4

# Logging config
LOG_LEVEL = os.getenv("MCPATHGEN_LOG_LEVEL", "INFO")
