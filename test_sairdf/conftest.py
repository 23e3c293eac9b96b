import pytest

from sairdf.config.config_loader import SaiRdfConfig
from sairdf.rdf.rdf_utils import TEXT_TURTLE, decode
from sairdf.resource import get_resource_from_graph
from test_sairdf.fixtures.sample_resources import BASE_URI, RESOURCE_URI, create_project_turtle
from test_sairdf.utils.test_helpers import setup_test_logging


setup_test_logging()


@pytest.fixture
def readable_graph():
    """Graph decoded from the sample project Turtle."""
    return decode(BASE_URI, create_project_turtle(), TEXT_TURTLE)


@pytest.fixture
def readable_resource(readable_graph):
    """The sample project resource, for read-only use."""
    return get_resource_from_graph(readable_graph, RESOURCE_URI)


@pytest.fixture
def updatable_resource():
    """A freshly decoded sample project resource for each test."""
    graph = decode(BASE_URI, create_project_turtle(), TEXT_TURTLE)
    return get_resource_from_graph(graph, RESOURCE_URI)


@pytest.fixture
def offline_config():
    """Configuration with remote document loading disabled."""
    config = SaiRdfConfig()
    config.config_data = {
        'jsonld': {
            'document_loader': {
                'type': 'none'
            }
        }
    }
    return config
