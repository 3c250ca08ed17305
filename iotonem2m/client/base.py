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

import uuid

from tornado import gen
from tornado.httpclient import AsyncHTTPClient, HTTPRequest
from tornado.log import app_log

from iotonem2m import settings
from iotonem2m.constants import (
    HTTP_CONTENT_TYPE_XML,
    HTTP_HEADER_ACCEPT,
    HTTP_HEADER_ORIGIN,
    HTTP_HEADER_REQUEST_ID,
    PARAM_CSE_BASE,
    PARAM_HOST,
    PARAM_PORT
)
from iotonem2m.templates import get_uri_template, resolve


def generate_request_id():
    return str(uuid.uuid4())


class OneM2MClient(object):
    """
    Base class for the clients of the oneM2M CSE. Each request is sent
    once, errors from the transport are raised to the caller as they are.
    """

    def __init__(self, config=None, http_client=None, uris=None):
        if config is None:
            config = settings.get_config()

        self.config = config['oneM2M']
        self.http_client = http_client or AsyncHTTPClient()
        self.uris = uris

    def get_uri(self, name, params):
        if self.uris is not None and name in self.uris:
            template = self.uris[name]
        else:
            template = get_uri_template(name)

        uri_params = {
            PARAM_HOST: self.config['host'],
            PARAM_PORT: self.config['port'],
            PARAM_CSE_BASE: self.config['cseBase']
        }
        uri_params.update(params)

        return resolve(template, uri_params)

    def build_headers(self, extra_headers=None):
        headers = {
            HTTP_HEADER_REQUEST_ID: generate_request_id(),
            HTTP_HEADER_ORIGIN: self.config.get('origin', 'Origin'),
            HTTP_HEADER_ACCEPT: HTTP_CONTENT_TYPE_XML
        }

        if extra_headers:
            headers.update(extra_headers)

        return headers

    @gen.coroutine
    def send(self, method, uri, headers, body=None):
        app_log.debug("Sending %s %s [%s]" %
                      (method, uri, headers[HTTP_HEADER_REQUEST_ID]))

        request = HTTPRequest(uri, method=method, headers=headers, body=body,
                              request_timeout=self.config.get('requestTimeout'))

        # Only transport errors are raised, responses with an error code
        # are handed back like any other response.
        response = yield self.http_client.fetch(request, raise_error=False)

        app_log.debug("Received %s for %s %s [%s]" %
                      (response.code, method, uri,
                       headers[HTTP_HEADER_REQUEST_ID]))

        raise gen.Return(response)
