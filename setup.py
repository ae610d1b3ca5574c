# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="foldertree",
    version="1.0.0",
    description="Create folder structures from ASCII tree text and generate tree text from directories",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["foldertree", "foldertree.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'foldertree=foldertree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
