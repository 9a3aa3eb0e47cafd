"""Client for the Tencent Cloud IM server-side REST API: signatures, profiles, mutes,
single-chat messages, recent contacts and all-member push."""

__version__ = "0.1.0"