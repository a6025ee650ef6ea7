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

from cdk_nag import NagSuppressions

STACK_SUPPRESSIONS = [
    {
        "id": "AwsSolutions-VPC7",
        "reason": "Flow logs are not collected for this single-server VPC.",
    },
    {
        "id": "AwsSolutions-EC23",
        "reason": "The server is public and listens on its HTTP ports for any IPv4 client.",
    },
    {
        "id": "AwsSolutions-EC26",
        "reason": "The root volume comes from the pinned server AMI as-is.",
    },
    {
        "id": "AwsSolutions-EC28",
        "reason": "Basic monitoring is sufficient for a single burstable server.",
    },
    {
        "id": "AwsSolutions-EC29",
        "reason": "The server is a standalone instance, it is replaced by redeploying the stack.",
    },
    {
        "id": "AwsSolutions-IAM4",
        "reason": "AmazonSSMManagedInstanceCore is the AWS managed policy for Session Manager access.",
    },
    {
        "id": "AwsSolutions-RDS2",
        "reason": "Storage encryption is inherited from the source snapshot.",
    },
    {
        "id": "AwsSolutions-RDS3",
        "reason": "The database runs in a single AZ without a standby replica.",
    },
    {
        "id": "AwsSolutions-RDS6",
        "reason": "The server authenticates to the database with the generated credentials.",
    },
    {
        "id": "AwsSolutions-RDS10",
        "reason": "The database is torn down with the stack, deletion protection is disabled.",
    },
    {
        "id": "AwsSolutions-RDS11",
        "reason": "The database listens on the default PostgreSQL port, reachable only from the server.",
    },
    {
        "id": "AwsSolutions-RDS13",
        "reason": "Automated backups are disabled, data is restored from a named snapshot.",
    },
    {
        "id": "AwsSolutions-SMG4",
        "reason": "The generated database credentials are not rotated.",
    },
]


def add_nag_suppressions(stack):
    NagSuppressions.add_stack_suppressions(stack, STACK_SUPPRESSIONS)
