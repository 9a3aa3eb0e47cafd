# timrest

A small client for the Tencent Cloud IM server-side REST API, using only the
standard library. It generates user signatures (UserSig), builds signed
request URLs, sends JSON requests, checks the status fields of each reply and
raises `IMError` when the service reports a failure.

## Installation

```
pip install timrest
```

## Getting started

```python
from timrest.client import Client, Options
from timrest.profile import Profile, ProfileAPI

client = Client(Options(app_id=1400000000, app_secret="secret", user_id="administrator"))

profiles = ProfileAPI(client)
profile = Profile("user1")
profile.nickname = "Alice"
profiles.set_profile(profile)

for p in profiles.get_profiles(["user1"], ["Tag_Profile_IM_Nick"]):
    print(p.user_id, p.nickname, p.is_valid)
```

`Options` takes `app_id`, `app_secret`, `user_id`, an optional `expiration`
for the signature in seconds (3600 when not positive) and an optional
`base_url`. The client caches its signature in `Client.user_sig()` and makes
a new one once it has expired.

By default requests are sent with `urllib`. A different transport can be
given as `Client(options, transport)`: a callable taking the HTTP method, the
full URL and the JSON-ready request body, and returning the decoded reply as
a dict. This is handy for tests and for plugging in another HTTP library.

## Modules

- `timrest.client` – `Options`, `Client` (`request`, `get`, `post`, `put`,
  `patch`, `delete`, `build_url`, `user_sig`) and `check_response`
- `timrest.sign` – `gen_user_sig`, `gen_private_map_key`,
  `gen_private_map_key_with_room_id`, `base64_url_encode`, `base64_url_decode`
- `timrest.user` – `User`: user id, profile attributes as properties
  (`nickname`, `gender`, `birthday`, `signature`, `allow_type`, `language`,
  `avatar`, `msg_settings`, `admin_forbid_type`, `level`, `role`),
  `set_location`/`location`, custom attributes and a recorded `error`
- `timrest.profile` – `Profile`, `ProfileAPI` (`set_profile`, `get_profiles`)
- `timrest.mute` – `MuteAPI` (`set_no_speaking`, `get_no_speaking`),
  `NoSpeaking`, `PERMANENT_MUTE`
- `timrest.private_message` – `PrivateMessage` and the records
  `SendMessageRet`, `SendMessagesRet`, `FetchMessagesArg`, `FetchMessagesRet`,
  `MessageItem`, `PullMessagesArg`, `UnreadMessageNumRet`
- `timrest.private` – `PrivateAPI` (`send_message`, `send_messages`,
  `import_message`, `fetch_messages`, `pull_messages`, `revoke_message`,
  `set_message_read`, `get_unread_message_num`)
- `timrest.session_models` – `SessionType`, `FetchSessionsArg`,
  `PullSessionsArg`, `FetchSessionsRet`, `SessionItem`
- `timrest.recentcontact` – `RecentContactAPI` (`fetch_sessions`,
  `pull_sessions`, `delete_session`)
- `timrest.push` – `PushAPI`, `PushMessage`, `PushCondition`
- `timrest.message` – `Message`, `OfflinePush`
- `timrest.types` – message content types such as `MsgTextContent` and
  `MsgImageContent`, `OfflinePushInfo`, `to_payload`, `message_type_of`
- `timrest.conv` – `to_string`
- `timrest.enums` – enumerations such as `GenderType`, `PushFlag`, `MsgType`
  and the standard profile attribute tags
- `timrest.errors` – `IMError`, carrying `code` and `message`

## Sending a single-chat message

```python
from timrest.private import PrivateAPI
from timrest.private_message import PrivateMessage
from timrest.types import MsgTextContent

message = PrivateMessage(sender="user1")
message.set_receivers("user2")
message.add_content(MsgTextContent(text="hello"))
message.offline_push.title = "New message"
result = PrivateAPI(client).send_message(message)
print(result.msg_key, result.msg_time)
```

`send_messages` sends the same message to every receiver at once.

## Paging

`PrivateAPI.pull_messages` and `RecentContactAPI.pull_sessions` are
generators that yield each page in turn, fetching the next one only while the
service reports more:

```python
from timrest.recentcontact import RecentContactAPI
from timrest.session_models import PullSessionsArg

for page in RecentContactAPI(client).pull_sessions(PullSessionsArg(user_id="user1")):
    for session in page.sessions:
        print(session.type, session.user_id or session.group_id)
```

## All-member push

```python
from timrest.push import PushAPI, PushMessage
from timrest.types import MsgTextContent

message = PushMessage()
message.add_content(MsgTextContent(text="announcement"))
message.add_condition_tags_or("vip", "beta")
task_id = PushAPI(client).push_message(message)
```

A condition targets either tags or attributes; setting both raises
`ValueError`.

## Errors

Error replies from the service, and arguments outside the service's limits
(for example an empty list of users, or more than 100 in one push call),
raise `timrest.errors.IMError`. Its `code` is the service's error code, or
`-1` for invalid parameters and `-2` for a reply that is not a JSON object.
A message without content, with an unknown content element or without a
receiver raises `ValueError` when it is validated before sending.

## What it does not do

The package covers profiles, global mutes, single-chat messages, recent
contacts and all-member push. It has no calls for friend lists, blacklists,
chat groups or operation statistics, and it has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```