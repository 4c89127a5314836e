'''
Test /api/suggest endpoint
'''

from fastapi.testclient import TestClient


SUGGEST_RESPONSE = {
    "hits": {"total": {"value": 3}, "hits": [{"_id": "a", "_source": {"__path": "/sites/demo/cats"}}]},
    "aggregations": {"autocomplete": {"buckets": [
        {"key": "cat", "doc_count": 2},
        {"key": "car", "doc_count": 1}
    ]}},
    "suggest": {"suggestions": [{"text": "ca", "offset": 0, "length": 2, "options": [{"text": "catalog"}]}]}
}


def test_suggest(client: TestClient, es_client):
    es_client.suggest_response = SUGGEST_RESPONSE

    response = client.get('/api/suggest', params={'contextNodeIdentifier': 'home-node', 'term': 'CA'})

    assert response.status_code == 200
    assert response.json() == {
        'completions': ['cat', 'car'],
        'suggestions': [{'text': 'catalog'}]
    }


def test_suggest_post(client: TestClient, es_client):
    es_client.suggest_response = SUGGEST_RESPONSE

    response = client.post('/api/suggest', json={'contextNodeIdentifier': 'home-node', 'term': 'ca'})

    assert response.status_code == 200
    assert response.json() == {
        'completions': ['cat', 'car'],
        'suggestions': [{'text': 'catalog'}]
    }


def test_suggest_without_matches(client: TestClient):
    response = client.get('/api/suggest', params={'contextNodeIdentifier': 'home-node', 'term': 'zzz'})

    assert response.status_code == 200
    assert response.json() == {'completions': [], 'suggestions': []}


def test_suggest_missing_term(client: TestClient, es_client):
    response = client.get('/api/suggest', params={'contextNodeIdentifier': 'home-node'})

    assert response.status_code == 200
    assert response.json() == {
        'completions': [],
        'suggestions': [],
        'errors': ['term has to be a string']
    }
    assert es_client.search_calls == []


def test_suggest_post_non_string_terms(client: TestClient, es_client):
    for term in [42, None, ['cat'], {'value': 'cat'}, True]:
        response = client.post('/api/suggest', json={'contextNodeIdentifier': 'home-node', 'term': term})
        assert response.status_code == 200
        assert response.json() == {
            'completions': [],
            'suggestions': [],
            'errors': ['term has to be a string']
        }

    assert es_client.search_calls == []


def test_suggest_missing_context_node_identifier(client: TestClient):
    response = client.get('/api/suggest', params={'term': 'cat'})
    assert response.status_code == 422


def test_suggest_unknown_context_node(client: TestClient):
    response = client.get('/api/suggest', params={'contextNodeIdentifier': 'missing-node', 'term': 'cat'})

    assert response.status_code == 200
    assert response.json() == {
        'completions': [],
        'suggestions': [],
        'errors': ['Could not execute query']
    }


def test_suggest_transport_failure(client: TestClient, es_client):
    es_client.error = ConnectionError('connection refused')

    response = client.get('/api/suggest', params={'contextNodeIdentifier': 'home-node', 'term': 'cat'})

    assert response.status_code == 200
    assert response.json() == {
        'completions': [],
        'suggestions': [],
        'errors': ['Could not execute query']
    }


def test_suggest_reuses_template(client: TestClient, es_client):
    for term in ['c', 'ca', 'Cat']:
        response = client.get('/api/suggest', params={'contextNodeIdentifier': 'news-node', 'term': term})
        assert response.status_code == 200

    assert len(es_client.lookup_calls) == 1
    assert [body['suggest']['suggestions']['text'] for body in es_client.suggest_calls] == ['c', 'ca', 'cat']


def test_suggest_invalid_bucket_key(client: TestClient, es_client):
    es_client.suggest_response = {"aggregations": {"autocomplete": {"buckets": [{"key": 5}]}}}

    response = client.get('/api/suggest', params={'contextNodeIdentifier': 'home-node', 'term': 'c'})

    assert response.status_code == 200
    assert response.json() == {
        'completions': [],
        'suggestions': [],
        'errors': ['Could not execute query']
    }
