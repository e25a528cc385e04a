"""
Configuration test fixtures for the test suite.

Contains converter configurations in the JSON layout read by
``Csv2RdfConfig.from_dict``.
"""

import copy

# =============================================================================
# Mapping Configuration Fixtures
# =============================================================================

CITY_MAPPING = {
    "type_namespace": "type:",
    "vertex_namespace": "vertex:",
    "edge_namespace": "edge:",
    "vertex_property_namespace": "vertexprop:",
    "edge_property_namespace": "edgeprop:",
    "default_named_graph": "dng:/",
    "default_type": "dt:/",
    "default_predicate": "dp:/",
}

CITY_CONFIG = {
    "input_file_extension": "csv",
    "mapper": {
        "always_add_property_statements": True,
        "mapping": CITY_MAPPING,
    },
}

CITY_RULE = {
    "src_pattern": "vertex:([0-9]+)",
    "type_uri": "type:City",
    "property_uri": "vertexprop:code",
    "dst_pattern": "city:{{VALUE}}",
}

CITY_CONFIG_WITH_TRANSFORMATION = {
    **CITY_CONFIG,
    "transformer": {
        "uri_post_transformations": [CITY_RULE],
    },
}

# =============================================================================
# Logging Configuration Fixtures
# =============================================================================

LOGGING_CONFIG = {
    "level": "DEBUG",
    "format": "json",
}


def config_with(**overrides):
    """Return a deep copy of the city configuration with top level overrides."""
    config = copy.deepcopy(CITY_CONFIG)
    config.update(overrides)
    return config
