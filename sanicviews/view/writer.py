"""
Response Stream Writer
Buffered text writer over a Sanic streaming response
"""
from typing import Awaitable, Callable, List, Optional

from sanic.response import HTTPResponse

ResponseStarter = Callable[[], Awaitable[HTTPResponse]]


class HttpResponseStreamWriter:
    """
    Encodes text and sends it to a streaming response

    The response is started by awaiting start_response on the first flush,
    so anything that must land in the response headers (session cookies,
    temp data) can still change while output stays buffered. Output is
    buffered until buffer_size characters are pending or flush() is called.
    Closing flushes but does not end the response; Sanic sends the final
    chunk once the handler returns.

    Example:
        async def start_response():
            return await request.respond(content_type='text/html; charset=utf-8')

        async with HttpResponseStreamWriter(start_response, 'utf-8') as writer:
            await writer.write('<p>Hello</p>')
    """

    def __init__(self, start_response: ResponseStarter, encoding: str, buffer_size: Optional[int] = None):
        if buffer_size is None:
            from sanicviews.defaults import DEFAULT_WRITER_BUFFER_SIZE
            buffer_size = DEFAULT_WRITER_BUFFER_SIZE

        self.start_response = start_response
        self.encoding = encoding
        self.buffer_size = buffer_size
        self.response: Optional[HTTPResponse] = None
        self._buffer: List[str] = []
        self._pending = 0
        self.closed = False

    @property
    def started(self) -> bool:
        return self.response is not None

    async def write(self, value: str):
        if self.closed:
            raise RuntimeError("Cannot write to a closed response writer")
        if not value:
            return

        self._buffer.append(value)
        self._pending += len(value)

        if self._pending >= self.buffer_size:
            await self.flush()

    async def flush(self):
        """Start the response if needed, then send pending output"""
        if self.response is None:
            self.response = await self.start_response()

        if not self._buffer:
            return

        data = ''.join(self._buffer).encode(self.encoding)
        self._buffer.clear()
        self._pending = 0
        await self.response.send(data)

    async def close(self):
        if self.closed:
            return
        await self.flush()
        self.closed = True

    async def __aenter__(self) -> 'HttpResponseStreamWriter':
        return self

    async def __aexit__(self, exc_type, exc, tb):
        # Pending output is dropped on failure
        if exc_type is None:
            await self.close()
        else:
            self._buffer.clear()
            self.closed = True


class HttpResponseStreamWriterFactory:
    """Creates writers with a shared buffer size"""

    def __init__(self, buffer_size: Optional[int] = None):
        if buffer_size is None:
            from sanicviews.defaults import DEFAULT_WRITER_BUFFER_SIZE
            from sanicviews.support import Config
            buffer_size = Config.get('view.WRITER_BUFFER_SIZE', DEFAULT_WRITER_BUFFER_SIZE)
        self.buffer_size = buffer_size

    def create_writer(self, start_response: ResponseStarter, encoding: str) -> HttpResponseStreamWriter:
        return HttpResponseStreamWriter(start_response, encoding, self.buffer_size)
