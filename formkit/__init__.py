"""Top-level package for the form rendering helpers.

The package bundles the small pieces of glue a server-side form layer
needs between an HTTP request and the rendered page: sanitising
submitted values, turning component identifiers into HTML field names,
exporting validation rules for the client-side validator and building
markup for choice lists and select boxes.

Typical usage:

```python
from formkit import DataType, extract_http_data, generate_html_name

name = generate_html_name("address-street")      # "address[street]"
street = extract_http_data(data, name, DataType.LINE)
```
"""

from formkit.models.enums import AttrMode, DataType
from formkit.models.rules import BranchRule, LeafRule, Rules
from formkit.models.schemas import AttrSpec
from formkit.services.markup import create_input_list, create_select_box, prepare_attrs
from formkit.services.rule_export import export_rules, export_rules_json
from formkit.utils.helpers import extract_http_data, generate_html_name
from formkit.utils.sanitization import sanitize

__all__: list[str] = [
    "AttrMode",
    "AttrSpec",
    "BranchRule",
    "DataType",
    "LeafRule",
    "Rules",
    "create_input_list",
    "create_select_box",
    "export_rules",
    "export_rules_json",
    "extract_http_data",
    "generate_html_name",
    "prepare_attrs",
    "sanitize",
]
