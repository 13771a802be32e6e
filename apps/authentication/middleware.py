from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken


class GraphQLJWTMiddleware:
    """Resolve ``Authorization: Bearer`` tokens for GraphQL requests.

    DRF views authenticate JWTs themselves; the GraphQL view only sees
    ``request.user``, so it is set here. Must run after Django's
    ``AuthenticationMiddleware``.
    """

    graphql_path = '/graphql/'

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path == self.graphql_path:
            token = self.get_token_from_request(request)
            if token:
                auth = JWTAuthentication()
                try:
                    validated_token = auth.get_validated_token(token)
                    request.user = auth.get_user(validated_token)
                    # no session cookie involved
                    request._dont_enforce_csrf_checks = True
                except (InvalidToken, AuthenticationFailed):
                    # Left anonymous; resolvers reject the request
                    pass

        return self.get_response(request)

    def get_token_from_request(self, request):
        header = request.META.get('HTTP_AUTHORIZATION')
        if header and header.startswith('Bearer '):
            return header.split(' ')[1].encode('utf-8')
        return None
