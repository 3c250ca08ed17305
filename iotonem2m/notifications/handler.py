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

import http.client
import json
import traceback
from inspect import isawaitable

from tornado import gen
from tornado import web
from tornado.log import app_log

from iotonem2m.constants import (
    ERROR_MESSAGE,
    ERROR_NAME,
    HTTP_CONTENT_TYPE_JSON,
    HTTP_HEADER_CONTENT_TYPE,
    RESOURCE_FIELDS
)
from iotonem2m.extractor import FieldExtractor


def empty_handler(record):
    return {}


class NotificationRequestHandler(web.RequestHandler):
    """
    Receives the notifications sent by the CSE, extracts the resource
    fields from their body and passes them to the notification handler
    installed in the server.
    """
    extractor = FieldExtractor(RESOURCE_FIELDS)

    def initialize(self, server):
        self.server = server

    @gen.coroutine
    def post(self):
        try:
            app_log.debug("Incoming notification from %s",
                          self.request.remote_ip)

            record = self.extractor.extract({}, self.request.body)

            # Read the slot once, it may be replaced while we wait
            handler = self.server.notification_handler or empty_handler
            result = handler(record)
            if isawaitable(result):
                result = yield result

            self.send_result(result)

        except Exception as e:
            self.on_exception(e)

        self.finish()

    def send_result(self, result):
        self.set_status(http.client.OK)

        if result is None:
            result = {}

        if isinstance(result, (dict, list)):
            self.set_header(HTTP_HEADER_CONTENT_TYPE, HTTP_CONTENT_TYPE_JSON)
            self.write(json.dumps(result))
        else:
            self.write(result)

    def on_exception(self, e):
        name = e.__class__.__name__

        app_log.debug("Error [%s] handling notification: %s" % (name, e))
        app_log.debug(traceback.format_exc())

        self.clear()
        self.set_status(http.client.INTERNAL_SERVER_ERROR)
        self.set_header(HTTP_HEADER_CONTENT_TYPE, HTTP_CONTENT_TYPE_JSON)
        self.write(json.dumps({ERROR_NAME: name, ERROR_MESSAGE: str(e)}))
