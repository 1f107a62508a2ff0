# -*- coding: utf-8 -*-
"""
setuptools>=40.1.0
"""
from setuptools import setup, find_packages
import os
import re

root_dir = os.path.abspath(os.path.dirname(__file__))

def filetext(path):
    text = ""
    with open(os.path.join(root_dir, path), "r", encoding="utf-8") as fi:
        text = fi.read()
    return text

def version(text):
    m = re.search("__version__\\s+=\\s+'([^']+)'", text)
    if m:
        return m.group(1)
    raise ValueError("バージョン番号がありません")

def requirement_lines(path):
    return [x.strip() for x in filetext(path).splitlines() if x.strip()]

#
#
#
package_name = "usageparse"

version = version(filetext("usageparse/__init__.py"))
requirements = requirement_lines("REQUIREMENTS.txt")
test_requirements = requirement_lines("TEST-REQUIREMENTS.txt")
long_description = filetext("README.rst") + "\n" + filetext("HISTORY.rst")


setup(
    name=package_name,
    version=version,
    
    packages=find_packages(exclude=['tests', 'tests.*']),
    
    license="MIT",
    
    install_requires=requirements,
    extras_require={"test": test_requirements},
    python_requires=">=3.9",
    
    author='Goro Sakata',
    author_email='gorosakata@ya.ru',
    url='',
    
    description='Parse command line arguments into a class from a declarative usage expression.',
    long_description=long_description,
    keywords='cli argument parser',

    entry_points={
        "console_scripts": ["usageparse=usageparse.__main__:main"],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
