"""
Pulumi runtime mocks shared by the unit tests.
"""
from __future__ import annotations

import pulumi


class RecordingMocks(pulumi.runtime.Mocks):
    """Echo resource inputs back as outputs and remember what was created."""

    def __init__(self):
        self.resources = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)
        if args.typ == "aws:cognito/identityProvider:IdentityProvider":
            resource_id = f"{args.inputs['userPoolId']}:{args.inputs['providerName']}"
        else:
            resource_id = f"{args.name}_id"
        return [resource_id, outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}

    def created(self, typ):
        return [resource for resource in self.resources if resource.typ == typ]


MOCKS = RecordingMocks()
pulumi.runtime.set_mocks(MOCKS, project="cognito-google-idp", stack="test", preview=False)
