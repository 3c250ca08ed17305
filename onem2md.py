#!/usr/bin/env python
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
import signal

from tornado import gen
from tornado.ioloop import IOLoop
from tornado.log import app_log
from tornado.options import options

from iotonem2m import settings
from iotonem2m.notifications import NotificationServer

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def log_notification(record):
    app_log.info("Notification received:\n%s" %
                 json.dumps(record, indent=4, sort_keys=True))
    return {}


@gen.coroutine
def shutdown(server):
    yield server.stop()
    IOLoop.current().stop()


def install_signal_handlers(io_loop, server):
    def on_signal(signum):
        app_log.info("Received signal %s, shutting down" % signum)
        io_loop.add_callback(shutdown, server)

    for signum in SHUTDOWN_SIGNALS:
        io_loop.asyncio_loop.add_signal_handler(signum, on_signal, signum)


def main():
    options.parse_command_line()

    server = NotificationServer(settings.get_config())
    server.set_notification_handler(log_notification)

    install_signal_handlers(IOLoop.current(), server)

    IOLoop.current().run_sync(server.start)
    app_log.info("Starting server!")
    IOLoop.current().start()

if __name__ == "__main__":
    main()
