from setuptools import setup, find_packages

setup(
    name="bsdlink-routing",
    version="0.1.0",
    description="Single-route bus itinerary planning for the BSD Link feeder network.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main_cli"],
    package_data={
        "bsdlink_routing": ["data/*.json"],
    },
    install_requires=[
        "requests",
        "pytz",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "bsdlink-routing=main_cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
