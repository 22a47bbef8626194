# pathmux

A small request router for HTTP services that needs nothing outside the
standard library. You register handlers against path patterns, with one handler
for each HTTP method. The multiplexer then picks the handler for each request
and collects REST parameters from the path.

## Install

```
pip install pathmux
```

## What it does not do

pathmux has no HTTP server, no socket handling and no request or response
classes. It routes objects that you supply. Parsing requests off the wire and
writing responses back is the job of whatever server you plug it into. It has
no command-line program either.

## Requests and responses

Requests and responses are duck-typed.

- A **request** needs `path` (the URL path, as a string) and `method`. The
  method is a name such as `"GET"`, or an `Enum` whose value is that name;
  names are upper-cased. It also needs `params`, a mutable mapping that
  receives REST parameters.
- A **response** needs `status`, `body` (a string) and `headers` (a mutable
  mapping).

Before routing, `forward_to_handler` sets `res.status` to `HTTPStatus.OK` and
`res.body` to `""`. Handlers are called as `handler(res, req)`.

```python
from dataclasses import dataclass, field
from http import HTTPStatus

from pathmux.multiplexer import Multiplexer


@dataclass
class Request:
    path: str
    method: str
    params: dict = field(default_factory=dict)


@dataclass
class Response:
    status: HTTPStatus = HTTPStatus.OK
    body: str = ""
    headers: dict = field(default_factory=dict)


def read_customer(res, req):
    res.body += f"customer {req.params['id']}"


mux = Multiplexer()
mux.handle("/customers/{id}", "A single customer").get(read_customer)

req, res = Request("/customers/42", "GET"), Response()
mux.forward_to_handler(res, req)
res.body      # 'customer 42'
req.params    # {'id': '42'}
```

## Path patterns

`pathmux.multiplexer.split_path` splits a path on `/` into its non-empty
segments. A path that ends with `/` gets a trailing empty segment. Each segment
of a pattern is turned into a matcher by
`pathmux.matchers.compile_to_matcher`:

| Segment              | Matcher           | Matches                              | REST parameter |
|----------------------|-------------------|--------------------------------------|----------------|
| `users`              | `StaticMatcher`   | exactly `users`                      | none           |
| `{id}`               | `VariableMatcher` | any non-empty segment                | `id`           |
| `{id:[0-9]+}`        | `RegexMatcher`    | a segment the whole regex matches    | `id`           |
| `{:[0-9]+}`          | `RegexMatcher`    | a segment the whole regex matches    | none           |
| empty (trailing `/`) | `EmptyMatcher`    | any segment                          | none           |

All matchers derive from `SegmentMatcher` and provide
`check_match(path_segment)` and `get_param(params, path_segment)`.

```python
from pathmux.matchers import compile_to_matcher
from pathmux.multiplexer import split_path

split_path("/regex1/{number:[0-9]+}/{text}")
# ['regex1', '{number:[0-9]+}', '{text}']
split_path("/foo/bar/")
# ['foo', 'bar', '']

matcher = compile_to_matcher("{value:[0-9]*}")
matcher.check_match("1337")   # True
matcher.check_match(" 11 ")   # False

params = {}
matcher.get_param(params, "1337")
params                        # {'value': '1337'}
```

A pattern matches a request path when each of its segments matches the
corresponding leading segment of the path. Extra trailing segments in the
request are allowed, so `/static1/foo/bar` also matches `/static1/foo/bar/bob`.
Candidates are tried in registration order and the first match wins, so
register more specific routes first.

## Registering handlers

`Multiplexer.handle(path, info="")` returns a `MethodsHandler`
(`pathmux.methods_handler`). Its registration methods return the handler
itself, so calls can be chained:

- `get`, `post`, `head`, `put` and `delete` each register a handler for that
  method.
- `method(name, handler)` registers a handler for any other method.

```python
mux.handle("/customers", "All customers").get(list_customers).post(create_customer)
mux.handle("/items/{id}").method("PATCH", patch_item)
```

Registering the same path again replaces the earlier registration. On a
`MethodsHandler`:

- `method_supported(method)` and `method in handler` tell whether a method is
  registered.
- `handler[method]` returns its handler, or raises `KeyError`.
- `propagate_endpoint(endpoints)` records `(info, methods)` under the
  endpoint's path.

A multiplexer can be given a base path, which may itself hold `{variables}`.
Requests must start with it, and it is stripped before the endpoints are tried.
Its parameters are collected into `req.params` as well. Endpoint paths are
reported with the base path prefixed.

```python
api = Multiplexer("/api/{version}")
```

## Dispatching and errors

Call `forward_to_handler(res, req)` to route a request. Once the response is
complete, call `on_request_handled(res, req)`.

Routing failures raise `pathmux.multiplexer.RequestError`, whose
`status_code` is an `HTTPStatus` and whose `message` is a short text:

- **404 Not Found**: no pattern, or the base path, matches.
- **405 Method Not Allowed**: the first matching pattern has no handler for
  the request method. Later patterns are not tried.

```python
from pathmux.multiplexer import RequestError

try:
    mux.forward_to_handler(res, req)
except RequestError as err:
    res.status, res.body = err.status_code, err.message
```

## Plugins

- `use_before(plugin)`: the plugin is called with `(res, req)` before routing,
  after the response has been reset.
- `use_after(plugin)`: the plugin is called with `(res, req)` from
  `on_request_handled`.
- `use_wrapper(plugin)`: the plugin is called with `(res, req, next_)` and must
  call `next_()` to continue. Wrappers nest, the first registered being the
  outermost.

## Listing endpoints

`get_endpoint_list()` returns a dict ordered by endpoint path. It maps each
full endpoint path to a `(summary, methods)` pair.

`endpoint_list_yaml_handler()` returns a handler that does two things:

- It sets the `Content-Type` header to `text/yaml`.
- It appends the list to the response body as YAML, with tab indentation and
  the summary left out when it is empty.

```python
mux.handle("/endpoints", "List all endpoints").get(mux.endpoint_list_yaml_handler())
```

The body then looks like this:

```
%YAML 1.2
---
-
	endpoint: /endpoints
	summary: List all endpoints
	methods:
		- GET
```

## Development

```
pip install -e ".[test]"
pytest
```