# Copyright (C) 2016 Hewlett Packard Enterprise Development LP
#
#  Licensed under the Apache License, Version 2.0 (the "License"); you may
#  not use this file except in compliance with the License. You may obtain
#  a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#  WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#  License for the specific language governing permissions and limitations
#  under the License.

import re
from xml.etree import ElementTree

from tornado.log import app_log

from iotonem2m.constants import HTTP_HEADER_PREFIX, RESPONSE_HEADER_FIELDS
from iotonem2m.exceptions import BodyParseError

XML_DECLARATION = re.compile(r'^\s*<\?xml[^>]*\?>')
BYTE_ORDER_MARK = '\ufeff'
BODY_WRAPPER = 'body'


def map_headers(headers):
    """
    Returns the oneM2M headers of a response, keyed by their lower-cased
    name without the X-M2M- prefix.
    """
    mapped = {}
    for name, value in headers.items():
        name = name.lower()
        if name.startswith(HTTP_HEADER_PREFIX):
            mapped[name[len(HTTP_HEADER_PREFIX):]] = value

    return mapped


def local_name(tag):
    # Drop both '{namespace}' and 'prefix:' qualifiers
    if '}' in tag:
        tag = tag.rsplit('}', 1)[1]
    return tag.rsplit(':', 1)[-1]


def is_blank(text):
    return text is None or not text.strip()


class FieldExtractor(object):
    """
    Builds flat field records out of oneM2M responses and notifications.

    Only the fields of the allowlist given on construction are extracted.
    Headers are matched on the suffix that follows the X-M2M- prefix and
    body elements on their tag, both case-insensitively. When a field is
    present in both, the value from the body is kept.
    """

    def __init__(self, fields, header_fields=RESPONSE_HEADER_FIELDS):
        self.fields = frozenset(field.lower() for field in fields)
        self.header_fields = self.fields | \
            frozenset(field.lower() for field in header_fields)

    def extract(self, headers, raw_body):
        record = {}

        for name, value in map_headers(headers).items():
            if name in self.header_fields:
                record[name] = value

        record.update(self.extract_body(raw_body))
        return record

    def extract_body(self, raw_body):
        fields = {}

        for element in self.parse_elements(raw_body):
            tag = local_name(element.tag).lower()
            if tag in self.fields:
                fields[tag] = ''.join(element.itertext()).strip()

        return fields

    def parse_elements(self, raw_body):
        """
        Returns the top level field elements of the body. The body may be a
        single resource element, whose children are the fields, or just a
        sequence of field elements.
        """
        if raw_body is None:
            return []

        if isinstance(raw_body, bytes):
            try:
                raw_body = raw_body.decode('utf-8-sig')
            except UnicodeDecodeError as e:
                raise BodyParseError("Body is not valid UTF-8: %s" % e)

        raw_body = XML_DECLARATION.sub('', raw_body.lstrip(BYTE_ORDER_MARK),
                                       count=1).strip()
        if not raw_body:
            return []

        try:
            root = ElementTree.fromstring('<%s>%s</%s>' % (BODY_WRAPPER,
                                                           raw_body,
                                                           BODY_WRAPPER))
        except ElementTree.ParseError as e:
            app_log.debug("Unable to parse body:\n%s" % raw_body)
            raise BodyParseError("Malformed XML body: %s" % e)

        elements = list(root)
        if not is_blank(root.text) or \
                any(not is_blank(element.tail) for element in elements):
            raise BodyParseError("Body contains text outside of XML elements")

        # A lone element that is not a field itself wraps the resource fields
        if len(elements) == 1 and len(elements[0]) and \
                local_name(elements[0].tag).lower() not in self.fields:
            elements = list(elements[0])

        return elements
