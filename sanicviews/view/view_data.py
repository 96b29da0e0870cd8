"""
View Data and Temp Data
Dictionaries handed to views during rendering
"""
from collections.abc import MutableMapping
from typing import Any, Dict, Iterator, Optional, Set


class ViewDataDictionary(dict):
    """
    Template values for a single render, plus the view model

    Example:
        view_data = ViewDataDictionary({'title': 'Inbox'}, model=messages)
        copy = ViewDataDictionary(view_data)   # keeps model
    """

    def __init__(self, source: Optional[Dict[str, Any]] = None, model: Any = None):
        super().__init__(source or {})
        if model is None and isinstance(source, ViewDataDictionary):
            model = source.model
        self.model = model

    def __repr__(self) -> str:
        return f'ViewDataDictionary({dict.__repr__(self)}, model={self.model!r})'


class SessionTempDataProvider:
    """
    Stores temp data in the request session under a single key

    The session is expected on request.ctx.session as a mutable mapping
    """

    def __init__(self, session_key: Optional[str] = None):
        if session_key is None:
            from sanicviews.defaults import DEFAULT_TEMP_DATA_SESSION_KEY
            from sanicviews.support import Config
            session_key = Config.get('view.TEMP_DATA_SESSION_KEY', DEFAULT_TEMP_DATA_SESSION_KEY)
        self.session_key = session_key

    @staticmethod
    def _session(request):
        return getattr(request.ctx, 'session', None)

    def load_temp_data(self, request) -> Dict[str, Any]:
        session = self._session(request)
        if session is None:
            return {}
        return dict(session.get(self.session_key) or {})

    def save_temp_data(self, request, values: Dict[str, Any]):
        session = self._session(request)
        if session is None:
            if values:
                raise RuntimeError(
                    "Temp data requires a session. "
                    "Make sure a session is started before saving temp data."
                )
            return

        if values:
            session[self.session_key] = dict(values)
        else:
            session.pop(self.session_key, None)


class TempDataDictionary(MutableMapping):
    """
    Values that survive exactly one subsequent request

    A key read with [] or get() is dropped on save() unless keep() is called.
    peek() reads without marking the key.
    """

    def __init__(self, request, provider: SessionTempDataProvider):
        self.request = request
        self.provider = provider
        self._data: Optional[Dict[str, Any]] = None
        self._initial_keys: Set[str] = set()
        self._retained_keys: Set[str] = set()

    @property
    def data(self) -> Dict[str, Any]:
        if self._data is None:
            self.load()
        return self._data

    def load(self):
        self._data = self.provider.load_temp_data(self.request)
        self._initial_keys = set(self._data.keys())
        self._retained_keys.clear()

    def save(self):
        if self._data is None:
            return

        for key in list(self._data.keys()):
            if key not in self._initial_keys and key not in self._retained_keys:
                del self._data[key]

        self.provider.save_temp_data(self.request, self._data)

    def keep(self, key: Optional[str] = None):
        """Retain one key, or every key when called without arguments"""
        if key is None:
            self._retained_keys.clear()
            self._retained_keys.update(self.data.keys())
        else:
            if self._data is None:
                self.load()
            self._retained_keys.add(key)

    def peek(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        value = self.data[key]
        self._initial_keys.discard(key)
        return value

    def __setitem__(self, key: str, value: Any):
        self.data[key] = value
        self._initial_keys.add(key)

    def __delitem__(self, key: str):
        del self.data[key]
        self._initial_keys.discard(key)
        self._retained_keys.discard(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, key) -> bool:
        return key in self.data
