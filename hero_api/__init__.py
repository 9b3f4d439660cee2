# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Heroes CRUD API with bearer-token login."""

__version__ = "1.0.0"
