"""
property_engine - Display / edit transforms over part records.

Public API:
    extract(record), extract_part(properties)  → {name: text}
    EditBuffer                                 - create/edit session buffer
    diff_category / switch_category            - category switch on a buffer
    coerce(values, tag) / coerce_buffer(buf)   → PartProperties
    OrderingStore                              - field visibility + order
    to_wire / from_wire                        - JSON wire shape
"""

from property_engine.extractor import (         # noqa: F401
    default_fields, display_string, extract, extract_part,
)
from property_engine.buffer import EditBuffer                       # noqa: F401
from property_engine.ordering import OrderingStore                  # noqa: F401
from property_engine.differ import (            # noqa: F401
    CategorySwitch, diff_category, switch_category,
)
from property_engine.coercer import (           # noqa: F401
    CoercionError, coerce, coerce_buffer, parse_value,
)
from property_engine.wire import WireFormatError, from_wire, to_wire   # noqa: F401
