'''
# AppSync client value objects

Plain value objects for fragments of the AWS AppSync control-plane API.
They are built from the service's JSON shapes (or from keyword arguments),
expose read-only properties and, for request shapes, serialize back into the
wire payload.

```python
import appsync_client

config = appsync_client.CachingConfig.create({
    "ttl": "60",
    "cachingKeys": ["$context.arguments.id", "$context.identity.sub"],
})
config.request_body()
# {'ttl': '60', 'cachingKeys': ['$context.arguments.id', '$context.identity.sub']}

key = appsync_client.ApiKey.create({"id": "da2-abc", "expires": "1700000000"})
key.expires    # '1700000000'
key.deletes    # None
```

A `CachingConfig` without a TTL can be constructed, but `request_body()`
raises `InvalidArgument`.
'''
import logging

from .exception import AppSyncClientException, InvalidArgument
from .value_object import ApiKey, ApiKeyInput, CachingConfig, CachingConfigInput

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiKey",
    "ApiKeyInput",
    "AppSyncClientException",
    "CachingConfig",
    "CachingConfigInput",
    "InvalidArgument",
]
