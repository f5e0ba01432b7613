# -*- coding: utf-8 -*-
import sys

from terrahealth.main import main

if __name__ == '__main__':
    sys.exit(main())
