"""Tests for the client query cache."""
import pytest
from unittest.mock import Mock
from src.sitewalk_app.services.query_cache import QueryCache

KEY = ('/api/projects', 1, 'cameras')


class TestQueryCache:

    def test_get_absent(self):
        cache = QueryCache()
        assert cache.get(KEY) is None
        assert cache.get(KEY, []) == []
        assert not cache.has(KEY)

    def test_set_data_notifies(self):
        cache = QueryCache()
        callback = Mock()
        cache.subscribe(KEY, callback)
        cache.set_data(KEY, [{'id': 1}])
        callback.assert_called_once_with([{'id': 1}])
        assert cache.get(KEY) == [{'id': 1}]

    def test_fetch_uses_cache_until_stale(self):
        cache = QueryCache()
        loader = Mock(return_value=['a'])
        assert cache.fetch(KEY, loader) == ['a']
        assert cache.fetch(KEY, loader) == ['a']
        loader.assert_called_once()

        cache.invalidate(KEY)
        assert cache.is_stale(KEY)
        loader.return_value = ['b']
        assert cache.fetch(KEY) == ['b']
        assert loader.call_count == 2

    def test_fetch_force(self):
        cache = QueryCache()
        loader = Mock(return_value=['a'])
        cache.fetch(KEY, loader)
        cache.fetch(KEY, force=True)
        assert loader.call_count == 2

    def test_fetch_without_loader(self):
        with pytest.raises(KeyError):
            QueryCache().fetch(KEY)

    def test_fetch_error_propagates(self):
        cache = QueryCache()
        with pytest.raises(RuntimeError):
            cache.fetch(KEY, Mock(side_effect=RuntimeError('offline')))

    def test_invalidate_refetches_subscribed(self):
        cache = QueryCache()
        loader = Mock(side_effect=[['old'], ['new']])
        callback = Mock()
        cache.subscribe(KEY, callback)
        cache.fetch(KEY, loader)

        assert cache.invalidate(KEY) == 1
        assert cache.get(KEY) == ['new']
        assert not cache.is_stale(KEY)
        assert callback.call_args_list[-1][0][0] == ['new']

    def test_invalidate_unsubscribed_only_marks_stale(self):
        cache = QueryCache()
        loader = Mock(return_value=['x'])
        cache.fetch(KEY, loader)
        assert cache.invalidate(KEY) == 0
        assert cache.is_stale(KEY)
        assert cache.get(KEY) == ['x']
        loader.assert_called_once()

    def test_invalidate_by_prefix(self):
        cache = QueryCache()
        cameras, doors, other = Mock(return_value=[]), Mock(return_value=[]), Mock(return_value=[])
        for key, loader in ((KEY, cameras), (('/api/projects', 1, 'access-points'), doors),
                            (('/api/lookup',), other)):
            cache.subscribe(key, Mock())
            cache.fetch(key, loader)

        assert cache.invalidate(('/api/projects', 1)) == 2
        assert cameras.call_count == 2
        assert doors.call_count == 2
        assert other.call_count == 1

    def test_invalidate_everything(self):
        cache = QueryCache()
        cache.set_data('a', 1)
        cache.set_data('b', 2)
        cache.invalidate()
        assert cache.is_stale('a') and cache.is_stale('b')

    def test_failed_refetch_keeps_data(self):
        cache = QueryCache()
        callback = Mock()
        cache.subscribe(KEY, callback)
        cache.fetch(KEY, Mock(side_effect=[['good'], RuntimeError('down')]))
        callback.reset_mock()

        cache.invalidate(KEY)
        assert cache.get(KEY) == ['good']
        assert isinstance(cache.get_error(KEY), RuntimeError)
        callback.assert_not_called()

    def test_unsubscribe(self):
        cache = QueryCache()
        callback = Mock()
        unsubscribe = cache.subscribe(KEY, callback)
        unsubscribe()
        unsubscribe()
        cache.set_data(KEY, [])
        callback.assert_not_called()

    def test_list_keys_are_normalized(self):
        cache = QueryCache()
        cache.set_data(['/api/projects', 1, 'cameras'], ['x'])
        assert cache.get(KEY) == ['x']
        assert cache.get('/api/lookup') is None

    def test_remove_and_clear(self):
        cache = QueryCache()
        cache.set_data('a', 1)
        cache.set_data('b', 2)
        cache.remove('a')
        assert not cache.has('a')
        cache.clear()
        assert cache.keys() == []
