# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="ponybuild",
    version="0.1.0",
    description="Build-description evaluator that generates Ninja build scripts",
    author="ponybuild contributors",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["ponybuild", "ponybuild.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'ponybuild=ponybuild.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
