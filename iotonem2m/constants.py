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

# oneM2M HTTP binding headers
HTTP_HEADER_PREFIX = "x-m2m-"
HTTP_HEADER_REQUEST_ID = "X-M2M-RI"
HTTP_HEADER_ORIGIN = "X-M2M-Origin"
HTTP_HEADER_NAME = "X-M2M-NM"
HTTP_HEADER_CONTENT_TYPE = "Content-Type"
HTTP_HEADER_ACCEPT = "Accept"

HTTP_CONTENT_TYPE_XML = "application/xml"
HTTP_CONTENT_TYPE_JSON = "application/json; charset=UTF-8"
HTTP_CONTENT_TYPE_RESOURCE = "application/vnd.onem2m-res+xml;ty=%s"

# oneM2M resource types
RESOURCE_TYPE_AE = 2
RESOURCE_TYPE_SUBSCRIPTION = 23

REQUEST_TYPE_CREATE = "POST"
REQUEST_TYPE_READ = "GET"
REQUEST_TYPE_DELETE = "DELETE"

# URI templates
AE_CREATION_URI = "AECreationTemplate"
AE_REMOVAL_URI = "AERemovalTemplate"
SUBSCRIPTION_CREATION_URI = "SubscriptionCreationTemplate"
SUBSCRIPTION_URI = "GetSubscriptionTemplate"

# Body templates
AE_CREATION_BODY = "aeCreationTemplate"
SUBSCRIPTION_CREATION_BODY = "subscriptionCreationTemplate"

# Template placeholders
PARAM_HOST = "Host"
PARAM_PORT = "Port"
PARAM_CSE_BASE = "CSEBase"
PARAM_AE_NAME = "AEName"
PARAM_CONTAINER_NAME = "ContName"
PARAM_SUBSCRIPTION_NAME = "SubsName"
PARAM_NOTIFICATION_URI = "uri"

# Field allowlists for each kind of resource
SUBSCRIPTION_FIELDS = frozenset(['RTY', 'RI', 'RN', 'PI', 'CT', 'LT', 'RSS',
                                 'NU', 'PN', 'NCT'])
RESOURCE_FIELDS = frozenset(['RTY', 'RI', 'RN', 'PI', 'CT', 'LT', 'CR', 'CNI',
                             'CBS', 'ST', 'CNF', 'CON', 'CS'])
AE_FIELDS = frozenset(['RTY', 'RI', 'RN', 'PI', 'CT', 'LT', 'API', 'AEI',
                       'POA'])

# Headers of every response that are kept besides the resource fields
RESPONSE_HEADER_FIELDS = frozenset(['RSC'])

# Notification server lifecycle
SERVER_STOPPED = "stopped"
SERVER_STARTING = "starting"
SERVER_LISTENING = "listening"
SERVER_STOPPING = "stopping"

# Error response fields
ERROR_NAME = "name"
ERROR_MESSAGE = "message"
