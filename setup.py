# setup.py
from setuptools import setup, find_packages

setup(
    name="includable",
    version="0.1.0",
    description="Test whether a Puppet class file exists on an environment's module path and can be included",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'includable=includable.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: System :: Systems Administration",
    ],
)
