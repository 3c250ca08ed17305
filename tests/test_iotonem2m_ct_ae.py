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

from tornado.testing import AsyncHTTPTestCase, gen_test

from iotonem2m.client import AEClient

from cse_mock import MockCSE, get_test_config, make_cse_app, read_fixture


class AETestCase(AsyncHTTPTestCase):

    def get_app(self):
        self.cse = MockCSE()
        return make_cse_app(self.cse)

    def setUp(self):
        super(AETestCase, self).setUp()
        self.client = AEClient(get_test_config(self.get_http_port()),
                               self.http_client)


class TestAECreation(AETestCase):
    expected_result = {
        'rty': '2',
        'ri': 'AE00000000000000000048',
        'rn': 'SmartGondor',
        'pi': 'Mobius',
        'ct': '2015-11-16T15:05:23+01:00',
        'lt': '2015-11-16T15:05:23+01:00',
        'api': 'SmartGondor',
        'aei': 'S00000000000000000048',
        'poa': '',
        'rsc': '2001'
    }

    def setUp(self):
        super(TestAECreation, self).setUp()
        self.cse.reply('POST', '/Mobius', 200,
                       read_fixture('AECreationSuccess.xml'), rsc='2001')

    @gen_test
    def test_sends_creation_request(self):
        yield self.client.create('SmartGondor')

        request = self.cse.requests[0]
        assert request.method == 'POST'
        assert request.path == '/Mobius'
        assert request.headers['X-M2M-Origin'] == 'Origin'
        assert request.headers['X-M2M-NM'] == 'SmartGondor'
        assert request.headers['Content-Type'] == \
            'application/vnd.onem2m-res+xml;ty=2'
        assert '<api>SmartGondor</api>' in request.body.decode('utf-8')

    @gen_test
    def test_returns_all_the_response_fields(self):
        result = yield self.client.create('SmartGondor')

        assert result == self.expected_result


class TestAERemoval(AETestCase):

    def setUp(self):
        super(TestAERemoval, self).setUp()
        self.cse.reply('DELETE', '/Mobius/AE-SmartGondor', 200, rsc='2002')

    @gen_test
    def test_sends_removal_request(self):
        result = yield self.client.remove('SmartGondor')

        assert result is None
        request = self.cse.requests[0]
        assert request.method == 'DELETE'
        assert request.path == '/Mobius/AE-SmartGondor'
        assert request.headers['X-M2M-Origin'] == 'Origin'
