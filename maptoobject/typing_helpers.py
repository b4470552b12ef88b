# Copyright (c) 2026 NASK. All rights reserved.

from collections.abc import (
    Callable,
    Mapping,
)
from typing import (
    Any,
    TypeVar,
)


T = TypeVar('T')

# a conversion function: takes a raw value, returns a converted value
# (or `None`)
ConversionFunction = Callable[[Any], Any]

# the type of the map being converted
SourceMapping = Mapping[str, Any]

# the declared type of a field: a class or any typing construct (such
# as `list[int]`, `Optional[str]`, `Literal['a', 'b']`...)
TypeSpec = Any
