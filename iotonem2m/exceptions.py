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


class OneM2MException(Exception):
    def __init__(self, detail=None):
        self.detail = detail
        super(OneM2MException, self).__init__(detail)

    @property
    def name(self):
        return self.__class__.__name__

    def __str__(self):
        if self.detail is None:
            return self.name
        return str(self.detail)


class BodyParseError(OneM2MException):
    pass


class TemplateNotFound(OneM2MException):
    pass


class ServerStateError(OneM2MException):
    pass
