# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="untracked-tree",
    version="0.1.0",
    description="Size-annotated directory tree of the untracked files in a git working directory",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["untracked_tree*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'untracked-tree=untracked_tree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
