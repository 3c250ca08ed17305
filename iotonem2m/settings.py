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

from tornado.options import define, options

define("onem2m_host", default="localhost", help="oneM2M CSE host")
define("onem2m_port", default=7579, type=int, help="oneM2M CSE port")
define("onem2m_cse_base", default="Mobius", help="oneM2M CSE base path")
define("onem2m_origin", default="Origin",
       help="Originator sent in the X-M2M-Origin header")

define("notifications_public_host", default="localhost",
       help="Host the CSE uses to reach the notification server")
define("notifications_port", default=7080, type=int,
       help="Port of the notification server")
define("notifications_path", default="/notifications",
       help="Path of the notification route")
define("notifications_listen", default="0.0.0.0",
       help="Address the notification server binds to")

define("request_timeout", default=None, type=float,
       help="Timeout in seconds for requests to the CSE")

define("config", default=None, help="Path to a config file",
       callback=lambda path: options.parse_config_file(path, final=False))


def get_config():
    """
    Returns a snapshot of the current options in the layout expected by
    the oneM2M clients and the notification server.
    """
    return {
        'oneM2M': {
            'host': options.onem2m_host,
            'port': options.onem2m_port,
            'cseBase': options.onem2m_cse_base,
            'origin': options.onem2m_origin,
            'requestTimeout': options.request_timeout,
            'notifications': {
                'publicHost': options.notifications_public_host,
                'port': options.notifications_port,
                'path': options.notifications_path,
                'listen': options.notifications_listen
            }
        }
    }
