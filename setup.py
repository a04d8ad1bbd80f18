#!/usr/bin/env python

from setuptools import setup, find_packages


description = 'Minimal Falcon ASGI service for uploading and serving images.'

requirements = [
    'falcon>=3.1.0',
    'aiofiles>=23.1.0',
    'python-dotenv>=0.19.0',
    'uvicorn>=0.11.0',
]

extras_require = {
    'dev': [
        'httpie',
    ],
    'test': [
        'pytest',
    ],
}

setup(
    name='falcon_imagedrop',
    version='0.1.0dev0',
    description=description,
    long_description=description,
    license='Apache v2',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
    ],
    keywords='falcon asgi upload images uvicorn',
    packages=find_packages(exclude=['contrib', 'docs', 'test*']),
    python_requires='>=3.8',
    install_requires=requirements,
    extras_require=extras_require,
    entry_points={
        'console_scripts': ['imagedrop=imagedrop.__main__:main'],
    },
    package_data={},
    data_files=[],
)
