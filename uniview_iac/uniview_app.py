"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: MIT-0

Permission is hereby granted, free of charge, to any person obtaining a copy of this
software and associated documentation files (the "Software"), to deal in the Software
without restriction, including without limitation the rights to use, copy, modify,
merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
permit persons to whom the Software is furnished to do so.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""

import os
from aws_cdk import Aspects
from cdk_nag import AwsSolutionsChecks

import aws_cdk as cdk

from uniview_iac.parameters import load_parameters
from uniview_iac.uniview_stack import UniviewStack
from uniview_iac.nag_suppressions import add_nag_suppressions


def build_app(app):
    """Add the Uniview stack to the app along with its nag checks and tags.

    The parameters file is taken from the ``parameters_file`` context key,
    defaulting to parameters.json.
    """
    parameters_file = app.node.try_get_context("parameters_file") or "parameters.json"

    config = load_parameters(parameters_file)

    uniview_build = UniviewStack(
        app,
        "UniviewIaCStack",
        res_name=config["resource_name"],
        instance=config["instance"],
        config=config,
        env=cdk.Environment(
            account=os.environ.get(
                "CDK_DEPLOY_ACCOUNT", os.environ.get("CDK_DEFAULT_ACCOUNT")
            ),
            region=os.environ.get("CDK_DEPLOY_REGION", config["region"]),
        ),
    )

    add_nag_suppressions(uniview_build)

    Aspects.of(app).add(AwsSolutionsChecks())

    cdk.Tags.of(app).add(config["tag_name"], config["tag_value"])

    return uniview_build
