# Import rule modules for their side effects (they register themselves).
# Import order is match precedence; keep narrower rules first.
from . import dx as _dx  # noqa: F401
from . import bulletins as _bulletins  # noqa: F401
from . import messages as _messages  # noqa: F401

# Explicit re-exports for library users.
from .base import (
    RegistryError as RegistryError,
)
from .base import (
    RuleMatch as RuleMatch,
)
from .base import (
    SpotRule as SpotRule,
)
from .base import (
    match_line as match_line,
)
from .base import (
    register as register,
)
from .base import seal

# No rules are added after this point
REGISTRY = seal()

__all__ = ["REGISTRY", "RegistryError", "RuleMatch", "SpotRule", "match_line", "register"]
