import os

from setuptools import setup, find_packages

version_file = os.path.join(
    os.path.dirname(__file__), "codec_string_explain", "version.py"
)
with open(version_file, "r") as f:
    exec(f.read())

readme_file = os.path.join(os.path.dirname(__file__), "README.md")
with open(readme_file, "r") as f:
    long_description = f.read()

setup(
    name="codec_string_explain",
    version=__version__,  # noqa: F821 -- loaded by 'exec' above
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"codec_string_explain.tables": ["*.csv"]},
    description="Explains the media codec parameter strings used in MIME types and manifests.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Telecommunications Industry",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
    ],
    keywords="codecs mime rfc6381 avc hevc vvc evc lcevc",
    python_requires=">=3.6",
    install_requires=[
        # NB: bitarray.util.base2ba is required for decoding base32 fields
        "bitarray >=1.9",
        "vc2_data_tables >=0.1.1, <2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "codec-string-explain=codec_string_explain.scripts.codec_string_explain:main",
        ],
    },
)
