import pytest
from fastapi.testclient import TestClient
from sitesearch.main import app
from sitesearch.services.container import ServiceContainer, get_suggest_service, get_health_service
from sitesearch.services.elasticsearch_service import ElasticsearchService

TEST_INDEX = "neoscr"

EMPTY_SUGGEST_RESPONSE = {
    "hits": {"total": {"value": 0}, "hits": []},
    "aggregations": {"autocomplete": {"buckets": []}},
    "suggest": {"suggestions": [{"text": "", "offset": 0, "length": 0, "options": []}]}
}


class MockElasticsearchClient:
    """Mock Elasticsearch client for testing"""

    def __init__(self):
        self.nodes = {}  # Node paths by identifier
        self.search_calls = []  # Every (index, body) passed to search
        self.suggest_response = EMPTY_SUGGEST_RESPONSE
        self.error = None  # Raised by suggestion searches when set
        self.lookup_error = None  # Raised by node lookups when set
        self.index_names = set()

    def add_node(self, identifier: str, path: str):
        self.nodes[identifier] = path

    def search(self, index: str, body: dict):
        """Mock search operation"""
        self.search_calls.append({"index": index, "body": body})

        if "suggest" in body:
            if self.error is not None:
                raise self.error
            return self.suggest_response

        # Node lookup by identifier
        if self.lookup_error is not None:
            raise self.lookup_error
        identifier = body["query"]["bool"]["filter"][0]["term"]["__identifier"]
        if identifier not in self.nodes:
            return {"hits": {"total": {"value": 0}, "hits": []}}
        hit = {
            "_id": identifier,
            "_index": index,
            "_source": {"__identifier": identifier, "__path": self.nodes[identifier]}
        }
        return {"hits": {"total": {"value": 1}, "hits": [hit]}}

    @property
    def suggest_calls(self):
        return [call["body"] for call in self.search_calls if "suggest" in call["body"]]

    @property
    def lookup_calls(self):
        return [call["body"] for call in self.search_calls if "suggest" not in call["body"]]

    @property
    def indices(self):
        """Mock indices property"""
        return MockIndices(self)


class MockIndices:
    """Mock indices operations"""

    def __init__(self, client):
        self.client = client

    def exists(self, index: str):
        return index in self.client.index_names

    def stats(self, index: str):
        return {
            "indices": {
                index: {"total": {"docs": {"count": 42}, "store": {"size_in_bytes": 2048}}}
            }
        }


@pytest.fixture(name="es_client")
def es_client_fixture():
    """Mock client with a small content tree"""
    client = MockElasticsearchClient()
    client.add_node("home-node", "/sites/demo")
    client.add_node("news-node", "/sites/demo/news")
    return client


@pytest.fixture(name="services")
def services_fixture(es_client: MockElasticsearchClient):
    return ServiceContainer(ElasticsearchService(client=es_client, index=TEST_INDEX))


@pytest.fixture(name="client")
def client_fixture(services: ServiceContainer):
    app.dependency_overrides[get_suggest_service] = lambda: services.suggest_service
    app.dependency_overrides[get_health_service] = lambda: services.health_service

    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
