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
    HTTP_CONTENT_TYPE_RESOURCE,
    HTTP_HEADER_CONTENT_TYPE,
    HTTP_HEADER_NAME,
    PARAM_AE_NAME,
    PARAM_CONTAINER_NAME,
    PARAM_NOTIFICATION_URI,
    PARAM_SUBSCRIPTION_NAME,
    REQUEST_TYPE_CREATE,
    REQUEST_TYPE_DELETE,
    REQUEST_TYPE_READ,
    RESOURCE_TYPE_SUBSCRIPTION,
    SUBSCRIPTION_CREATION_BODY,
    SUBSCRIPTION_CREATION_URI,
    SUBSCRIPTION_FIELDS,
    SUBSCRIPTION_URI
)
from iotonem2m.extractor import FieldExtractor
from iotonem2m.templates import get_template, resolve


class SubscriptionClient(OneM2MClient):
    """
    Manages the subscriptions to the changes of a container in the CSE.
    Notifications for every subscription are sent to the notification
    server of this process.
    """
    extractor = FieldExtractor(SUBSCRIPTION_FIELDS)

    def get_notification_uri(self):
        notifications = self.config['notifications']
        return 'http://%s:%s%s' % (notifications['publicHost'],
                                   notifications['port'],
                                   notifications['path'])

    def get_subscription_uri(self, application, container, name):
        return self.get_uri(SUBSCRIPTION_URI,
                            {PARAM_AE_NAME: application,
                             PARAM_CONTAINER_NAME: container,
                             PARAM_SUBSCRIPTION_NAME: name})

    @gen.coroutine
    def create(self, application, container, name):
        app_log.debug("Creating Subscription [%s] to Container [%s] for "
                      "service [%s]" % (name, container, application))

        uri = self.get_uri(SUBSCRIPTION_CREATION_URI,
                           {PARAM_AE_NAME: application,
                            PARAM_CONTAINER_NAME: container})
        body = resolve(get_template(SUBSCRIPTION_CREATION_BODY),
                       {PARAM_NOTIFICATION_URI: self.get_notification_uri()})
        headers = self.build_headers({
            HTTP_HEADER_NAME: name,
            HTTP_HEADER_CONTENT_TYPE:
                HTTP_CONTENT_TYPE_RESOURCE % RESOURCE_TYPE_SUBSCRIPTION
        })

        response = yield self.send(REQUEST_TYPE_CREATE, uri, headers, body)
        raise gen.Return(self.extractor.extract(response.headers,
                                                response.body))

    @gen.coroutine
    def get(self, application, container, name):
        app_log.debug("Getting Subscription [%s] in container [%s] for "
                      "service [%s]" % (name, container, application))

        uri = self.get_subscription_uri(application, container, name)
        response = yield self.send(REQUEST_TYPE_READ, uri,
                                   self.build_headers())

        raise gen.Return(self.extractor.extract(response.headers,
                                                response.body))

    @gen.coroutine
    def remove(self, application, container, name):
        app_log.debug("Removing Subscription [%s] from Container [%s] for "
                      "service [%s]" % (name, container, application))

        uri = self.get_subscription_uri(application, container, name)
        yield self.send(REQUEST_TYPE_DELETE, uri, self.build_headers())
