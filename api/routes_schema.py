"""
api.routes_schema - /api/categories endpoints.

Expose the category schema so clients can build forms and filter
panels without hard-coding field lists.
"""

from flask import jsonify

from api import api_bp
from property_engine.extractor import display_string
from schema.fields import FieldSpec
from schema.registry import all_categories, base_fields, category_fields, lookup_tag


def _spec_dict(spec: FieldSpec) -> dict:
    return {
        "name": spec.name,
        "identifier": spec.identifier,
        "kind": spec.kind.value,
        "default": display_string(spec.kind, spec.default),
    }


@api_bp.route("/categories")
def schema_categories():
    """List category tags in declaration order."""
    return jsonify({"categories": [t.value for t in all_categories()]})


@api_bp.route("/categories/<tag>")
def schema_category(tag: str):
    """Base + category fields for one tag.  Unknown tags are a 404 here."""
    lookup = lookup_tag(tag)
    if not lookup.recognized:
        return jsonify({"error": f"unknown category {tag!r}"}), 404
    return jsonify({
        "category": lookup.tag.value,
        "base_fields": [_spec_dict(s) for s in base_fields()],
        "fields": [_spec_dict(s) for s in category_fields(lookup.tag)],
    })
