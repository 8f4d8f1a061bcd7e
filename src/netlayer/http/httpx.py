from httpx import AsyncClient, HTTPError, InvalidURL

from .types import HttpImplementation, Request, RequestFailed, Response


def wrap(client: AsyncClient) -> HttpImplementation:
    async def impl(request: Request) -> Response:
        try:
            # Header values that are not ASCII fail here with UnicodeEncodeError
            http_request = client.build_request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
            response = await client.send(http_request)
            return Response(response.status_code, await response.aread())
        except (HTTPError, InvalidURL, ValueError) as exc:
            raise RequestFailed(exc)

    return impl
