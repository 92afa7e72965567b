#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

__name__ == '__main__' and setup(name='aiohttp-sui-rpc',
      version='0.1.0',
      description='asyncio client for the Sui JSON-RPC and event subscription API',  # NOQA
      license='Apache 2.0',
      install_requires=[
          'aiohttp>=3.8',
          'yarl',
          'pydantic>=2.0',
      ],
      extras_require={
          'test': [
              'pytest',
              'pytest-asyncio>=0.21',
          ],
      },
      python_requires='>=3.9',
      packages=find_packages(exclude=['tests', 'tests.*']),
      zip_safe=False,
      entry_points={
          'pytest11': [
              'aiohttp-sui-rpc = aiohttp_sui_rpc.pytest',
          ]
     })
