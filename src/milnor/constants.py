# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

import math

# Constants

INFINITY = math.inf

TRUNCATION_ZERO = 0

ENV_DEBUG = "MILNOR_DEBUG"

# Parameters

PARAM_DEFAULT_PRIME = 2
