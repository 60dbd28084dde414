# -*- coding: utf-8 -*-

from .channel_post import handle_channel_post, LANGUAGE_GUARD_KEY

__all__ = ["handle_channel_post", "LANGUAGE_GUARD_KEY"]
