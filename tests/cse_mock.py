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

import os

from tornado import web

FIXTURES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                            'fixtures')

CSE_BASE = 'Mobius'
NOTIFICATIONS_PORT = 7080
NOTIFICATIONS_PATH = '/notifications'
RESPONSE_REQUEST_ID = '123450e17f923-a5b0-436a-b7f2-4a17d0c1410b'


def read_fixture(name):
    with open(os.path.join(FIXTURES_DIR, name)) as f:
        return f.read()


def get_test_config(cse_port, notifications_port=NOTIFICATIONS_PORT,
                    listen='127.0.0.1'):
    return {
        'oneM2M': {
            'host': 'localhost',
            'port': cse_port,
            'cseBase': CSE_BASE,
            'origin': 'Origin',
            'requestTimeout': 5,
            'notifications': {
                'publicHost': 'localhost',
                'port': notifications_port,
                'path': NOTIFICATIONS_PATH,
                'listen': listen
            }
        }
    }


class MockCSE(object):
    """
    Records the requests received by the mocked CSE and answers them with
    the replies registered for their method and path.
    """

    def __init__(self):
        self.requests = []
        self.replies = {}

    def reply(self, method, path, status, body=None, rsc=None):
        headers = {'X-M2M-RI': RESPONSE_REQUEST_ID}
        if rsc is not None:
            headers['X-M2M-RSC'] = rsc

        self.replies[(method, path)] = (status, body, headers)

    def get_reply(self, request):
        return self.replies.get((request.method, request.path),
                                (404, None, {'X-M2M-RSC': '4004'}))


class MockCSEHandler(web.RequestHandler):

    def initialize(self, cse):
        self.cse = cse

    def handle(self):
        self.cse.requests.append(self.request)

        status, body, headers = self.cse.get_reply(self.request)
        self.set_status(status)
        for name, value in headers.items():
            self.set_header(name, value)

        if body:
            self.set_header('Content-Type', 'application/xml')
            self.write(body)

    get = handle
    post = handle
    delete = handle


def make_cse_app(cse):
    return web.Application([(r'/.*', MockCSEHandler, dict(cse=cse))])
