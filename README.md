# reqtools

Small building blocks for HTTP client code. It has no dependencies outside the
standard library.

## Modules

- `reqtools.types`
  - `Url` is a `str` subclass. Adding a string to a `Url` gives a `Url`.
  - `Header` is a mutable mapping of header names to values. Lookups ignore
    the case of the name. When you iterate over it, the names come in order of
    their lower-cased form. If you assign to a name that is already present in
    another spelling, the first spelling is kept.
- `reqtools.timeout`
  - `Timeout(value)` takes whole milliseconds as an `int`, or a
    `datetime.timedelta`. Any other type raises `TypeError`.
  - `Timeout.milliseconds()` returns the value. It raises `OverflowError` if
    the value lies outside the signed 64-bit range.
- `reqtools.util`
  - `parse_header(text)` parses a raw response header block and returns a
    `ParsedHeader` with `header` (a `Header`), `status_line` and `reason`.
    Each `HTTP/` status line starts the fields afresh, so the result holds the
    last response in the block.
  - `parse_cookies(lines)` parses Netscape cookie-jar lines, which are
    tab-separated, and returns frozen `Cookie` records. Each record has `name`,
    `value`, `domain`, `include_subdomains`, `path`, `https_only` and
    `expires`, where `expires` is a UTC `datetime`.
  - `split(text, delimiter)` splits text on a delimiter. A delimiter at the
    very end does not produce an empty last token.
  - `url_encode(s)` percent-encodes everything except unreserved characters.
  - `url_decode(s)` decodes percent escapes and leaves `+` as it is.
  - `secure_clear(buffer)` overwrites a `bytearray` with zeros and then empties
    it. Any other type raises `TypeError`.
  - `is_true(s)` returns whether `s` is `"true"`, in any letter case.
- `reqtools.threadpool`
  - `ThreadPool(min_threads=1, max_threads=None, max_idle_ms=60000)` runs
    callables on worker threads.
    - When `max_threads` is `None`, the limit is the CPU count.
    - The pool adds workers as tasks queue up, up to `max_threads`.
    - A worker that stays idle for `max_idle_ms` exits, as long as more than
      `min_threads` workers remain.
  - Methods:
    - `start(start_threads=0)`
    - `stop()`: waits for the workers to finish. Tasks still queued stay in
      the queue.
    - `pause()` and `resume()`
    - `wait()`: blocks until the queue is empty and all workers are idle.
    - `submit(fn, *args, **kwargs)`: returns a `concurrent.futures.Future`.
  - The pool is a context manager: entering starts it and leaving stops it.
  - Read-only properties: `status` (a `PoolStatus`: `STOP`, `RUNNING` or
    `PAUSE`), `thread_count`, `idle_thread_count` and `task_count`.
  - Misuse raises `RuntimeError`: calling `start()` on a pool that is already
    started, calling `stop()` on a stopped pool, or calling `submit()` on a
    stopped pool.

## Installation

```
pip install .
```

## Examples

Types, header parsing and URL encoding:

```python
from reqtools.types import Header, Url
from reqtools.util import parse_header, url_encode, url_decode

url = Url("http://localhost:8080") + "/hello.html"

header = Header({"Content-Type": "text/html"})
assert header["content-type"] == "text/html"

parsed = parse_header(
    "HTTP/1.1 200 OK\r\n"
    "Server: nginx\r\n"
    "Content-Type: application/json\r\n"
    "\r\n"
)
assert parsed.status_line == "HTTP/1.1 200 OK"
assert parsed.reason == "OK"
assert parsed.header["server"] == "nginx"

assert url_encode("Hello World!") == "Hello%20World%21"
assert url_decode("Hello%20World%21") == "Hello World!"
```

Timeouts:

```python
from datetime import timedelta
from reqtools.timeout import Timeout

assert Timeout(1500).milliseconds() == 1500
assert Timeout(timedelta(seconds=2)).milliseconds() == 2000
```

Thread pool:

```python
from reqtools.threadpool import ThreadPool

results = []
with ThreadPool(1, 4, 250) as pool:
    for n in range(10):
        pool.submit(results.append, n * n)
    pool.wait()

assert sorted(results) == [n * n for n in range(10)]
```

## What it does not do

This package does not send HTTP requests. It has no session, no connection
handling and no request functions. It provides only the helper types, the
parsers and the thread pool described above.

## Running the tests

```
pip install .[test]
pytest
```