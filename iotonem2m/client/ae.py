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

from tornado import gen
from tornado.log import app_log

from iotonem2m.client.base import OneM2MClient
from iotonem2m.constants import (
    AE_CREATION_BODY,
    AE_CREATION_URI,
    AE_FIELDS,
    AE_REMOVAL_URI,
    HTTP_CONTENT_TYPE_RESOURCE,
    HTTP_HEADER_CONTENT_TYPE,
    HTTP_HEADER_NAME,
    PARAM_AE_NAME,
    REQUEST_TYPE_CREATE,
    REQUEST_TYPE_DELETE,
    RESOURCE_TYPE_AE
)
from iotonem2m.extractor import FieldExtractor
from iotonem2m.templates import get_template, resolve


class AEClient(OneM2MClient):
    extractor = FieldExtractor(AE_FIELDS)

    @gen.coroutine
    def create(self, application):
        app_log.debug("Creating Application Entity [%s]" % application)

        params = {PARAM_AE_NAME: application}
        uri = self.get_uri(AE_CREATION_URI, params)
        body = resolve(get_template(AE_CREATION_BODY), params)
        headers = self.build_headers({
            HTTP_HEADER_NAME: application,
            HTTP_HEADER_CONTENT_TYPE:
                HTTP_CONTENT_TYPE_RESOURCE % RESOURCE_TYPE_AE
        })

        response = yield self.send(REQUEST_TYPE_CREATE, uri, headers, body)
        raise gen.Return(self.extractor.extract(response.headers,
                                                response.body))

    @gen.coroutine
    def remove(self, application):
        app_log.debug("Removing Application Entity [%s]" % application)

        uri = self.get_uri(AE_REMOVAL_URI, {PARAM_AE_NAME: application})
        yield self.send(REQUEST_TYPE_DELETE, uri, self.build_headers())
