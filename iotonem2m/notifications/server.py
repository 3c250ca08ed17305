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

from tornado import gen
from tornado import web
from tornado.httpserver import HTTPServer
from tornado.log import app_log
from tornado.netutil import bind_sockets

from iotonem2m import settings
from iotonem2m.constants import (
    SERVER_LISTENING,
    SERVER_STARTING,
    SERVER_STOPPED,
    SERVER_STOPPING
)
from iotonem2m.exceptions import ServerStateError
from iotonem2m.notifications.handler import NotificationRequestHandler


class NotificationServer(object):
    """
    HTTP server receiving the notifications of the subscriptions created
    in the CSE.

    A single notification handler can be installed at any time with
    set_notification_handler(). It is called with the field record of each
    notification and its result, or a future for it, is sent back as the
    response. Without a handler, notifications are answered with an empty
    JSON object.
    """

    def __init__(self, config=None):
        if config is None:
            config = settings.get_config()

        self.config = config['oneM2M']['notifications']
        self.notification_handler = None
        self.state = SERVER_STOPPED
        self.app = None
        self.http_server = None
        self.port = None

    def set_notification_handler(self, handler):
        self.notification_handler = handler

    def make_app(self):
        return web.Application([
            (self.config['path'], NotificationRequestHandler,
             dict(server=self))
        ])

    @gen.coroutine
    def start(self):
        if self.state != SERVER_STOPPED:
            raise ServerStateError("Notification server is %s" % self.state)

        self.state = SERVER_STARTING

        app_log.info("Starting notifications server on port [%s]" %
                     self.config['port'])
        app_log.debug("Using config:\n\n%s\n" %
                      json.dumps(self.config, indent=4))

        try:
            sockets = bind_sockets(self.config['port'],
                                   self.config.get('listen', '0.0.0.0'))
        except Exception:
            self.state = SERVER_STOPPED
            raise

        self.app = self.make_app()
        self.http_server = HTTPServer(self.app)
        self.http_server.add_sockets(sockets)
        self.port = sockets[0].getsockname()[1]

        self.state = SERVER_LISTENING
        app_log.info("Notifications server listening on [%s]:%s" %
                     (self.config.get('listen', '0.0.0.0'), self.port))

    @gen.coroutine
    def stop(self):
        if self.state != SERVER_LISTENING:
            app_log.debug("Notification server is %s, nothing to stop" %
                          self.state)
            return

        app_log.info("Stopping notifications server")
        self.state = SERVER_STOPPING

        # In-flight requests are not waited for
        self.http_server.stop()
        self.http_server = None
        self.app = None
        self.port = None

        self.state = SERVER_STOPPED
