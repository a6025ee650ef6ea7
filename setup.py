import setuptools


with open("README.md") as fp:
    long_description = fp.read()


setuptools.setup(
    name="uniview_iac",
    version="0.0.1",
    description="CDK Python app for the Uniview server, network and snapshot-restored database",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="author",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aws-cdk-lib>=2.92.0,<3.0.0",
        "cdk-nag>=2.10.0,<3.0.0",
        "constructs>=10.0.0,<11.0.0",
        "boto3>=1.26.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Utilities",
    ],
)
