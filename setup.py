from setuptools import setup, find_packages

setup(
    name='sai-rdf-utils',
    version='0.1.0',
    description='Typed property access and multi-format codecs for rdflib graphs',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["test_sairdf", "test_sairdf.*"]),
    include_package_data=True,

    license='Apache License 2.0',
    install_requires=[
        "rdflib>=7.0.0",
        "PyLD>=2.0.3",
        "requests",
        "rfc3986>=2.0.0",
        "PyYAML",
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
