'''
Value objects for the AWS AppSync control-plane API.

Every class keeps its supplied fields in ``_values`` keyed by the Python
attribute name; ``name_mapping`` gives the wire key used by the service for
each attribute.
'''
import builtins
import logging
import typing

import typing_extensions

from ..exception import InvalidArgument

logger = logging.getLogger(__name__)


class ApiKeyInput(typing_extensions.TypedDict, total=False):
    '''Wire shape accepted by ``ApiKey.create``.'''

    id: typing.Optional[builtins.str]
    description: typing.Optional[builtins.str]
    expires: typing.Optional[builtins.str]
    deletes: typing.Optional[builtins.str]


class CachingConfigInput(typing_extensions.TypedDict, total=False):
    '''Wire shape accepted by ``CachingConfig.create``.'''

    ttl: typing_extensions.Required[builtins.str]
    cachingKeys: typing.Optional[typing.Sequence[builtins.str]]


def _log_unknown_keys(
    cls: typing.Type[typing.Any],
    input: typing.Mapping[builtins.str, typing.Any],
) -> None:
    known = cls.name_mapping.values()
    unknown = [k for k in input if k not in known]
    if unknown:
        logger.debug("ignoring unknown keys for %s: %r", cls.__name__, unknown)


class ApiKey:
    '''Describes an API key.

    Customers invoke AppSync GraphQL API operations with API keys as an
    identity mechanism. There are two key versions:

    **da1**: introduced at launch in November 2017. These keys always expire
    after 7 days and ceased to be valid after February 21, 2018.

    - ``ListApiKeys`` and ``CreateApiKey`` return the expiration time in milliseconds.
    - ``UpdateApiKey`` is not available for this key version.
    - Expiration is stored in milliseconds, so the storage TTL never removed
      these keys; they were deleted in a one-time action.

    **da2**: introduced in February 2018 with support for extending key expiration.

    - ``ListApiKeys``, ``CreateApiKey`` and ``UpdateApiKey`` return the expiration
      and deletion time in seconds, and accept a user-provided expiration time
      in seconds.
    - Expired keys are kept for 60 days after the expiration time. Expiration can
      be updated while the key is not deleted, which reinstates it.
    - The key is deleted after the deletion time.

    This class does not interpret either scheme: values are kept as returned.

    Example::

        api_key = ApiKey(
            id="da2-abcdefghijklmnopqrstuvwxyz",
            description="ci key",
            expires="1700002800",
            deletes="1705186800"
        )
    '''

    name_mapping: typing.ClassVar[typing.Dict[builtins.str, builtins.str]] = {
        "id": "id",
        "description": "description",
        "expires": "expires",
        "deletes": "deletes",
    }

    def __init__(
        self,
        *,
        id: typing.Optional[builtins.str] = None,
        description: typing.Optional[builtins.str] = None,
        expires: typing.Optional[builtins.str] = None,
        deletes: typing.Optional[builtins.str] = None,
    ) -> None:
        '''
        :param id: The API key ID.
        :param description: A description of the purpose of the API key.
        :param expires: The time after which the API key expires. Seconds since the epoch, rounded down to the nearest hour.
        :param deletes: The time after which the API key is deleted. Seconds since the epoch, rounded down to the nearest hour.
        '''
        self._values: typing.Dict[builtins.str, typing.Any] = {}
        if id is not None:
            self._values["id"] = id
        if description is not None:
            self._values["description"] = description
        if expires is not None:
            self._values["expires"] = expires
        if deletes is not None:
            self._values["deletes"] = deletes

    @builtins.classmethod
    def create(
        cls,
        input: typing.Union["ApiKey", ApiKeyInput, typing.Mapping[builtins.str, typing.Any]],
    ) -> "ApiKey":
        '''Build an ``ApiKey`` from its wire shape.

        An existing ``ApiKey`` is returned unchanged.
        '''
        if isinstance(input, cls):
            return input
        _log_unknown_keys(cls, input)
        return cls(
            id=input.get("id"),
            description=input.get("description"),
            expires=input.get("expires"),
            deletes=input.get("deletes"),
        )

    @builtins.property
    def id(self) -> typing.Optional[builtins.str]:
        '''The API key ID.'''
        result = self._values.get("id")
        return typing.cast(typing.Optional[builtins.str], result)

    @builtins.property
    def description(self) -> typing.Optional[builtins.str]:
        '''A description of the purpose of the API key.'''
        result = self._values.get("description")
        return typing.cast(typing.Optional[builtins.str], result)

    @builtins.property
    def expires(self) -> typing.Optional[builtins.str]:
        '''The time after which the API key expires.

        The date is represented as seconds since the epoch, rounded down to the
        nearest hour.
        '''
        result = self._values.get("expires")
        return typing.cast(typing.Optional[builtins.str], result)

    @builtins.property
    def deletes(self) -> typing.Optional[builtins.str]:
        '''The time after which the API key is deleted.

        The date is represented as seconds since the epoch, rounded down to the
        nearest hour.
        '''
        result = self._values.get("deletes")
        return typing.cast(typing.Optional[builtins.str], result)

    def __eq__(self, rhs: typing.Any) -> builtins.bool:
        return isinstance(rhs, self.__class__) and rhs._values == self._values

    def __ne__(self, rhs: typing.Any) -> builtins.bool:
        return not (rhs == self)

    def __hash__(self) -> builtins.int:
        return hash((self.__class__, tuple(self._values.items())))

    def __repr__(self) -> str:
        return "ApiKey(%s)" % ", ".join(
            k + "=" + repr(v) for k, v in self._values.items()
        )


class CachingConfig:
    '''The caching configuration for a resolver.

    ``ttl`` is required by the service but only checked when the request
    body is built, so a partial config can still be constructed.

    Example::

        caching_config = CachingConfig(
            ttl="60",

            # the properties below are optional
            caching_keys=["$context.arguments.id", "$context.identity.sub"]
        )
    '''

    name_mapping: typing.ClassVar[typing.Dict[builtins.str, builtins.str]] = {
        "ttl": "ttl",
        "caching_keys": "cachingKeys",
    }

    def __init__(
        self,
        *,
        ttl: typing.Optional[builtins.str] = None,
        caching_keys: typing.Optional[typing.Sequence[builtins.str]] = None,
    ) -> None:
        '''
        :param ttl: The TTL in seconds for a resolver that has caching activated.
        :param caching_keys: The caching keys for a resolver that has caching activated. Order is kept. Default: - No caching keys
        '''
        self._values: typing.Dict[builtins.str, typing.Any] = {}
        if ttl is not None:
            self._values["ttl"] = ttl
        if caching_keys is not None:
            self._values["caching_keys"] = list(caching_keys)

    @builtins.classmethod
    def create(
        cls,
        input: typing.Union["CachingConfig", CachingConfigInput, typing.Mapping[builtins.str, typing.Any]],
    ) -> "CachingConfig":
        '''Build a ``CachingConfig`` from its wire shape.

        An existing ``CachingConfig`` is returned unchanged.
        '''
        if isinstance(input, cls):
            return input
        _log_unknown_keys(cls, input)
        return cls(
            ttl=input.get("ttl"),
            caching_keys=input.get("cachingKeys"),
        )

    @builtins.property
    def ttl(self) -> builtins.str:
        '''The TTL in seconds for a resolver that has caching activated.'''
        result = self._values.get("ttl")
        if result is None:
            raise InvalidArgument("Required property 'ttl' is missing")
        return typing.cast(builtins.str, result)

    @builtins.property
    def caching_keys(self) -> typing.List[builtins.str]:
        '''The caching keys for a resolver that has caching activated.

        :default: - empty list
        '''
        result = self._values.get("caching_keys")
        return list(result) if result is not None else []

    def request_body(self) -> typing.Dict[builtins.str, typing.Any]:
        '''Payload for embedding in an outbound request.

        :raises InvalidArgument: ``ttl`` was never supplied.
        '''
        payload: typing.Dict[builtins.str, typing.Any] = {}
        v = self._values.get("ttl")
        if v is None:
            logger.debug("rejecting %r: ttl is missing", self)
            raise InvalidArgument(
                'Missing parameter "ttl" for "%s". The value cannot be null.'
                % self.__class__.__name__
            )
        payload[self.name_mapping["ttl"]] = v
        v = self._values.get("caching_keys")
        if v is not None:
            payload[self.name_mapping["caching_keys"]] = [item for item in v]

        return payload

    def __eq__(self, rhs: typing.Any) -> builtins.bool:
        return isinstance(rhs, self.__class__) and rhs._values == self._values

    def __ne__(self, rhs: typing.Any) -> builtins.bool:
        return not (rhs == self)

    def __hash__(self) -> builtins.int:
        # caching_keys is stored as a list
        return hash((
            self.__class__,
            tuple(
                (k, tuple(v) if isinstance(v, list) else v)
                for k, v in self._values.items()
            ),
        ))

    def __repr__(self) -> str:
        return "CachingConfig(%s)" % ", ".join(
            k + "=" + repr(v) for k, v in self._values.items()
        )


__all__ = [
    "ApiKey",
    "ApiKeyInput",
    "CachingConfig",
    "CachingConfigInput",
]
