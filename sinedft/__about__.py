# -*- coding: utf-8 -*-
#
__version__ = '0.1.0'
__author__ = 'Nico Schlömer'
__author_email__ = 'nico.schloemer@gmail.com'
__license__ = 'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)'
__status__ = 'Development Status :: 3 - Alpha'
