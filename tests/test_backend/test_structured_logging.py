"""Tests for the backend JSON log format."""
import json
import logging
from backend.logging_config import StructuredFormatter


def make_record(message, **extra):
    record = logging.LogRecord('backend.utils', logging.WARNING, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_record_outside_request():
    entry = json.loads(StructuredFormatter().format(make_record('started')))
    assert entry['level'] == 'WARNING'
    assert entry['logger'] == 'backend.utils'
    assert entry['message'] == 'started'
    assert 'request' not in entry


def test_record_carries_request_and_extra_fields(app):
    record = make_record('API Error (404): Camera not found', extra_fields={'status_code': 404})
    with app.test_request_context('/api/cameras/7', method='PUT'):
        entry = json.loads(StructuredFormatter().format(record))

    assert entry['status_code'] == 404
    assert entry['request']['method'] == 'PUT'
    assert entry['request']['path'] == '/api/cameras/7'
    assert entry['request']['args'] == {'resource_id': 7}
