#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Render a motif summary table with sequence and K-context logos to PDF.
"""

import logo_summary.cli


if __name__ == "__main__":
	logo_summary.cli.main()
