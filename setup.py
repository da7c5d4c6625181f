# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirviz",
    version="0.1.0",
    description="Parse Markdown or ASCII directory trees into an editable tree model",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirviz", "dirviz.*"]),
    package_data={
        "dirviz.interface": ["locales/*.json"],
    },
    include_package_data=True,
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'dirviz=dirviz.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
