# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

import sys

from .cli import main

sys.exit(main())
