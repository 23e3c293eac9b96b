"""
Resource Access Package

Typed reads and replace-style updates of the properties of a resource in an
rdflib graph.

The package is organized as follows:
- resource_read_impl: optional and required typed readers
- resource_update_impl: replace-then-insert writers
- resource_utils: resource lookup and creation
"""

from .resource_read_impl import (
    get_statement,
    get_required_statement,
    get_object,
    get_required_object,
    get_objects,
    get_required_objects,
    get_uri_object,
    get_required_uri_object,
    get_uri_objects,
    get_required_uri_objects,
    get_string_object,
    get_required_string_object,
    get_string_objects,
    get_required_string_objects,
    get_integer_object,
    get_required_integer_object,
    get_date_time_object,
    get_required_date_time_object,
    get_boolean_object,
    get_required_boolean_object,
)
from .resource_update_impl import (
    update_object,
    update_string_object,
    update_uri_object,
    update_date_time_object,
    update_integer_object,
    update_boolean_object,
    update_objects,
    update_uri_objects,
    update_string_objects,
)
from .resource_utils import get_resource_from_graph, get_new_resource, get_new_resource_for_type

__all__ = [
    'get_statement',
    'get_required_statement',
    'get_object',
    'get_required_object',
    'get_objects',
    'get_required_objects',
    'get_uri_object',
    'get_required_uri_object',
    'get_uri_objects',
    'get_required_uri_objects',
    'get_string_object',
    'get_required_string_object',
    'get_string_objects',
    'get_required_string_objects',
    'get_integer_object',
    'get_required_integer_object',
    'get_date_time_object',
    'get_required_date_time_object',
    'get_boolean_object',
    'get_required_boolean_object',
    'update_object',
    'update_string_object',
    'update_uri_object',
    'update_date_time_object',
    'update_integer_object',
    'update_boolean_object',
    'update_objects',
    'update_uri_objects',
    'update_string_objects',
    'get_resource_from_graph',
    'get_new_resource',
    'get_new_resource_for_type',
]
