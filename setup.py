# setup.py
from setuptools import find_packages, setup

setup(
    name="filekit",
    version="0.1.0",
    description="Convenience operations on filesystem paths: scoped temp resources, traversal and text I/O",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'filekit=filekit.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
