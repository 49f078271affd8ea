from setuptools import setup, find_packages


setup(
    name="uz2",
    version="0.1",
    packages=find_packages(),
    description="Compress Unreal packages into chunked .uz2 files for UT2004 redirect downloads.",
    install_requires=[],
    entry_points={
        "console_scripts": [
            "uz2=uz2.cli:main",
        ]
    },
)
