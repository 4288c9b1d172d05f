import os

from setuptools import setup, find_packages


def read(file_name):
    with open(os.path.join(os.path.dirname(__file__), file_name)) as f:
        return f.read()


setup(
    name="easydelay",
    version="0.1",

    # Requires python3.8 (asyncio.get_running_loop, IsolatedAsyncioTestCase)
    python_requires=">=3.8",

    # Automatically import easydelay packages
    packages=find_packages(exclude=["tests", "tests.*"]),

    # Tests
    test_suite="tests",

    # Metadata
    description="Pausable, resumable and cancellable delays for asyncio",
    long_description=read('README.MD'),
    long_description_content_type="text/markdown",
    license="MIT",
    keywords="easydelay delay timer asyncio pause resume",
    install_requires=[
        "colorama",
    ],
)
