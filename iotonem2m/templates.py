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

import json
import os
import re

from tornado.log import app_log

from iotonem2m.exceptions import TemplateNotFound

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                             'data')
URIS_FILE = 'uris.json'
BODY_TEMPLATE_EXT = '.xml'

PLACEHOLDER_PATTERN = re.compile(r'{{(\w+)}}')

_uri_templates = None
_body_templates = {}


def resolve(template, params):
    """
    Replaces every {{Placeholder}} token of the template with the value
    given for it in params. Placeholders without a value are kept as they
    are. Values are inserted verbatim, no escaping is done.
    """
    def replace(match):
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)


def load_uri_templates(templates_dir=TEMPLATES_DIR):
    path = os.path.join(templates_dir, URIS_FILE)
    app_log.debug("Loading URI templates from %s" % path)

    with open(path) as f:
        return json.load(f)


def get_uri_template(name):
    global _uri_templates

    if _uri_templates is None:
        _uri_templates = load_uri_templates()

    if name not in _uri_templates:
        raise TemplateNotFound("Unknown URI template '%s'" % name)

    return _uri_templates[name]


def get_template(name):
    if name not in _body_templates:
        path = os.path.join(TEMPLATES_DIR, name + BODY_TEMPLATE_EXT)
        if not os.path.isfile(path):
            raise TemplateNotFound("Unknown body template '%s'" % name)

        app_log.debug("Loading body template %s" % path)
        with open(path) as f:
            _body_templates[name] = f.read()

    return _body_templates[name]
