from shlex import quote

from .builder import OutboundRequest


def to_curl(request: OutboundRequest) -> str:
    parts = [f"curl -X {request.method.value} {quote(request.url)}"]

    for k, v in request.headers.items():
        parts.append(f"-H {quote(f'{k}: {v}')}")

    body = request.body
    if body is not None:
        if body.kind == "form-data":
            for k, v in body.fields:
                parts.append(f"-F {quote(f'{k}={v}')}")
        else:
            parts.append(f"--data-raw {quote(body.content or '')}")

    return " \\\n  ".join(parts)
