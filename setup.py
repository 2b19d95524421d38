#!/usr/bin/python
from setuptools import setup, find_namespace_packages

setup(
      name='remotestrap',
      version='0.1.0',
      description='remote host bootstrap helper over SSH',
      author='remotestrap developers',
      license='MIT',
      packages=find_namespace_packages(include=["remotestrap", "remotestrap.*"]),
      include_package_data=True,
      zip_safe=False,
      # 安装依赖的其他包
      install_requires = [
        "asyncssh",
        "PyYAML",
        "click",
        "rich",
        "marshmallow",
        "marshmallow-dataclass",
      ],
      extras_require={
        "test": [
          "pytest",
        ],
      },
    # 设置程序的入口
    entry_points={
        'console_scripts':[
            'remotestrap = remotestrap.cli:main'
        ]
    },
    python_requires='>=3.8'
)
