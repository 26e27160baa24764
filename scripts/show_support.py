import argparse
import logging

import numpy as np

from copsupport import CoPSupport

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print the CoP constraints of a rectangular contact")
    parser.add_argument('--normal', type=float, nargs=3, default=[0.0, 0.0, 1.0],
                        metavar=('NX', 'NY', 'NZ'))
    parser.add_argument('--box', type=float, nargs=2, default=[0.2, 0.1], metavar=('LENGTH', 'WIDTH'))
    parser.add_argument('--plot', action='store_true')
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    support = CoPSupport()
    support.nsurf = args.normal
    support.box = args.box
    print(support)
    with np.printoptions(precision=4, suppress=True):
        print(f"A =\n{support.A}")
        print(f"ub = {support.ub}")
        print(f"lb = {support.lb}")

    if args.plot:
        from copsupport.visualize import plot_support_region
        plot_support_region(support)
