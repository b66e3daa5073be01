#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
import sys

from bin2array.main import main

sys.exit(main(sys.argv[1:]))
