"""Embedded HTTP status table.

Format: ``CODE | NAME | ALIASES | FLAGS | METHODS | DESCRIPTION``

- Lines starting with ``#`` and blank lines are ignored.
- ``-`` marks an empty field.
- Aliases are separated by ``;``, flags and methods by ``,``.
- ``Any`` in METHODS means the status is not tied to particular methods.
"""

from __future__ import annotations

from typing import Final

STATUS_TABLE: Final[str] = """\
# --- 1xx: Informational ---
100 | Continue                        | - | - | Any | Interim response; client should continue the request.
101 | Switching Protocols             | - | - | GET,UPGRADE | Server is switching protocols (e.g., HTTP 1.1 to 2.0 or WebSocket).
102 | Processing                      | - | - | DAV | Server has received and is processing the request, but no response is available yet.
103 | Early Hints                     | - | - | Any | Used to return some response headers before final HTTP message.

# --- 2xx: Success ---
200 | OK                              | - | - | Any | Standard response for successful HTTP requests.
201 | Created                         | - | - | POST,PUT | The request has been fulfilled, resulting in the creation of a new resource.
202 | Accepted                        | - | - | Any | The request has been accepted for processing, but processing is not complete.
203 | Non-Authoritative Information   | - | - | Any | The returned meta-information is from a local or third-party copy, not the origin server.
204 | No Content                      | - | - | Any | The server successfully processed the request and is not returning any content.
205 | Reset Content                   | - | - | Any | The server successfully processed the request, but asks client to reset the document view.
206 | Partial Content                 | - | - | GET | The server is delivering only part of the resource (Range header).
207 | Multi-Status                    | - | - | DAV | XML body contains multiple status codes for multiple independent operations.
208 | Already Reported                | - | - | DAV | The members of a DAV binding have already been enumerated in a preceding part.
226 | IM Used                         | - | - | GET | The server has fulfilled a request for the resource via Delta encoding.

# --- 3xx: Redirection ---
300 | Multiple Choices                | - | - | Any | Indicates multiple options for the resource from which the client may choose.
301 | Moved Permanently               | - | - | Any | This and all future requests should be directed to the given URI.
302 | Found                           | - | - | Any | Resource found at different URI, but client should use original URI for future.
303 | See Other                       | - | - | POST,PUT,DELETE | The response to the request can be found under another URI using GET method.
304 | Not Modified                    | - | - | GET,HEAD | Resource has not been modified since the version specified by the request headers.
305 | Use Proxy                       | - | DEPRECATED | - | The requested resource is available only through a proxy.
306 | (Unused)                        | - | DEPRECATED | - | No longer used. Originally meant "Switch Proxy".
307 | Temporary Redirect              | - | - | Any | Resource found at different URI; keep using original method for future requests.
308 | Permanent Redirect              | - | - | Any | The request and all future requests should be repeated using another URI.

# --- 4xx: Client Error ---
400 | Bad Request                     | - | - | Any | The server cannot or will not process the request due to an apparent client error.
401 | Unauthorized                    | - | - | Any | Authentication is required and has failed or has not yet been provided.
402 | Payment Required                | - | - | Any | Reserved for future use.
403 | Forbidden                       | - | - | Any | The request was valid, but the server is refusing action.
404 | Not Found                       | - | - | Any | The requested resource could not be found but may be available in the future.
405 | Method Not Allowed              | - | - | Any | A request method is not supported for the requested resource.
406 | Not Acceptable                  | - | - | Any | Content negotiation failed; server cannot produce response matching accept headers.
407 | Proxy Authentication Required   | - | - | Any | The client must first authenticate itself with the proxy.
408 | Request Timeout                 | - | - | Any | The server timed out waiting for the request.
409 | Conflict                        | - | - | PUT,POST | Indicates that the request could not be processed because of conflict in the request.
410 | Gone                            | - | - | Any | Indicates that the resource requested is no longer available and will not be available again.
411 | Length Required                 | - | - | POST,PUT | The request did not specify the length of its content, which is required by the resource.
412 | Precondition Failed             | - | - | Any | The server does not meet one of the preconditions that the requester put on the request.
413 | Content Too Large               | Payload Too Large;Request Entity Too Large | - | Any | The request is larger than the server is willing or able to process.
414 | URI Too Long                    | Request-URI Too Long | - | GET | The URI provided was too long for the server to process.
415 | Unsupported Media Type          | - | - | POST,PUT | The request entity has a media type which the server or resource does not support.
416 | Range Not Satisfiable           | Requested Range Not Satisfiable | - | GET | The client has asked for a portion of the file, but the server cannot supply that portion.
417 | Expectation Failed              | - | - | Any | The server cannot meet the requirements of the Expect request-header field.
418 | I'm a teapot                    | - | UNOFFICIAL | Any | The server refuses the attempt to brew coffee with a teapot (RFC 2324).
421 | Misdirected Request             | - | - | Any | The request was directed at a server that is not able to produce a response.
422 | Unprocessable Content           | Unprocessable Entity | - | Any | The request was well-formed but has semantic errors (e.g. validation failed).
423 | Locked                          | - | - | DAV | The resource that is being accessed is locked.
424 | Failed Dependency               | - | - | DAV | The request failed because it depended on another request and that request failed.
425 | Too Early                       | - | - | Any | Indicates that the server is unwilling to risk processing a request that might be replayed.
426 | Upgrade Required                | - | - | GET | The client should switch to a different protocol.
428 | Precondition Required           | - | - | Any | The origin server requires the request to be conditional.
429 | Too Many Requests               | - | - | Any | The user has sent too many requests in a given amount of time (rate limiting).
431 | Request Header Fields Too Large | - | - | Any | The server is unwilling to process the request because its header fields are too large.
444 | No Response                     | - | UNOFFICIAL | Any | Nginx internal code: server returns no information to the client and closes the connection.
449 | Retry With                      | - | UNOFFICIAL | Any | Microsoft extension: The request should be retried after doing the appropriate action.
450 | Blocked by Windows Parental     | - | UNOFFICIAL | Any | Microsoft extension: Error generated when Windows Parental Controls blocks access.
451 | Unavailable For Legal Reasons   | - | - | Any | The resource is unavailable for legal reasons (e.g., censorship or government-mandated blocked).

# --- 5xx: Server Error ---
500 | Internal Server Error           | - | - | Any | A generic error message, given when an unexpected condition was encountered.
501 | Not Implemented                 | - | - | Any | The server either does not recognize the request method, or it lacks the ability to fulfil the request.
502 | Bad Gateway                     | - | - | Any | The server was acting as a gateway or proxy and received an invalid response from the upstream server.
503 | Service Unavailable             | - | - | Any | The server is currently unavailable (overloaded or down for maintenance).
504 | Gateway Timeout                 | - | - | Any | The server was acting as a gateway or proxy and did not receive a timely response from the upstream.
505 | HTTP Version Not Supported      | - | - | Any | The server does not support the HTTP protocol version used in the request.
506 | Variant Also Negotiates         | - | - | Any | Transparent content negotiation for the request results in a circular reference.
507 | Insufficient Storage            | - | - | DAV | The server is unable to store the representation needed to complete the request.
508 | Loop Detected                   | - | - | DAV | The server detected an infinite loop while processing the request.
509 | Bandwidth Limit Exceeded        | - | UNOFFICIAL | Any | The server has exceeded the bandwidth limit specified by the server administrator.
510 | Not Extended                    | - | - | Any | Further extensions to the request are required for the server to fulfil it.
511 | Network Authentication Required | - | - | Any | The client needs to authenticate to gain network access.
599 | Network Connect Timeout Error   | - | UNOFFICIAL | Any | Used by some proxies to signal a network connect timeout behind the proxy.
"""
