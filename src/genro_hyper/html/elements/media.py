# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Media elements: images, audio, video, frames and image maps.

Example:
    >>> Video().src('/intro.mp4').controls().muted().preload('metadata').to_html()
    '<video src="/intro.mp4" controls muted preload="metadata"></video>'
"""

from __future__ import annotations

from typing import Any

from ..element import ContainerElement, VoidElement
from ..mixins import LinkAttributes, MediaAttributes

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'


class Img(MediaAttributes, VoidElement):
    """``<img>``; alt text is expected on every content image."""

    tag_name = 'img'

    def __init__(self, src: Any = None, alt: Any = None) -> None:
        super().__init__()
        if src is not None:
            self.src(src)
        if alt is not None:
            self.alt(alt)


class Audio(MediaAttributes, ContainerElement):
    tag_name = 'audio'


class Video(MediaAttributes, ContainerElement):
    tag_name = 'video'

    def playsinline(self, playsinline: Any = True):
        return self.attr('playsinline', playsinline)


class Source(MediaAttributes, VoidElement):
    """Alternative source for picture, audio and video."""

    tag_name = 'source'

    def type(self, mime_type: Any):
        return self.attr('type', mime_type)

    def media(self, query: Any):
        return self.attr('media', query)

    def srcset(self, srcset: Any):
        return self.attr('srcset', srcset)

    def sizes(self, sizes: Any):
        return self.attr('sizes', sizes)


class Track(VoidElement):
    """Timed text track (subtitles, captions) of audio and video."""

    tag_name = 'track'

    def src(self, url: Any):
        return self.attr('src', url)

    def kind(self, kind: Any):
        return self.attr('kind', kind)

    def srclang(self, lang: Any):
        return self.attr('srclang', lang)

    def label(self, label: Any):
        return self.attr('label', label)

    def default_track(self, default: Any = True):
        return self.attr('default', default)


class Picture(ContainerElement):
    tag_name = 'picture'


class Figure(ContainerElement):
    tag_name = 'figure'


class Figcaption(ContainerElement):
    tag_name = 'figcaption'


class Canvas(MediaAttributes, ContainerElement):
    tag_name = 'canvas'


class Iframe(MediaAttributes, ContainerElement):
    tag_name = 'iframe'

    def name(self, name: Any):
        return self.attr('name', name)

    def sandbox(self, permissions: Any = ''):
        """Empty permissions apply every restriction."""
        return self.attr('sandbox', permissions)

    def allow(self, policy: Any):
        return self.attr('allow', policy)

    def referrerpolicy(self, policy: Any):
        return self.attr('referrerpolicy', policy)


class Embed(MediaAttributes, VoidElement):
    tag_name = 'embed'

    def type(self, mime_type: Any):
        return self.attr('type', mime_type)


class ObjectElement(MediaAttributes, ContainerElement):
    """``<object>``, named to stay clear of the builtin."""

    tag_name = 'object'

    def type(self, mime_type: Any):
        return self.attr('type', mime_type)

    def data(self, url: Any):
        return self.attr('data', url)

    def name(self, name: Any):
        return self.attr('name', name)

    def form(self, form_id: Any):
        return self.attr('form', form_id)


class Param(VoidElement):
    tag_name = 'param'

    def name(self, name: Any):
        return self.attr('name', name)

    def value(self, value: Any):
        return self.attr('value', value)


class Svg(MediaAttributes, ContainerElement):
    """Inline ``<svg>`` container. For named icons see :class:`Icon`."""

    tag_name = 'svg'

    def view_box(self, view_box: Any):
        return self.attr('viewBox', view_box)

    def xmlns(self, namespace: Any = SVG_NAMESPACE):
        return self.attr('xmlns', namespace)


class Map(ContainerElement):
    """Client-side image map."""

    tag_name = 'map'

    def name(self, name: Any):
        return self.attr('name', name)


class Area(LinkAttributes, VoidElement):
    """Clickable region of an image map."""

    tag_name = 'area'

    def shape(self, shape: Any):
        return self.attr('shape', shape)

    def coords(self, coords: Any):
        return self.attr('coords', coords)

    def alt(self, text: Any):
        return self.attr('alt', text)
