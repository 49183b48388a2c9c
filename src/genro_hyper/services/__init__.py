# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Services used by elements: icon providers and validation helpers."""

from .icons import (
    HeroiconsProvider,
    IconManager,
    IconProvider,
    SvgDirectoryProvider,
    current_icon_manager,
    use_icon_manager,
)
from .validation import (
    FormValidationRegistry,
    ValidationRuleTransformer,
    current_registry,
    use_registry,
)

__all__ = [
    'IconProvider',
    'IconManager',
    'SvgDirectoryProvider',
    'HeroiconsProvider',
    'current_icon_manager',
    'use_icon_manager',
    'FormValidationRegistry',
    'ValidationRuleTransformer',
    'current_registry',
    'use_registry',
]
