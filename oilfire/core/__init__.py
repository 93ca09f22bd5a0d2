"""Core calculation modules for Oilfire.

This package contains the engine sizing pipeline:
- fuels: Tabulated fuel data and the nozzle area-ratio table
- thermo: Flame temperature, Isp and propellant flows
- nozzle: Throat/exit sizing and cone lengths
- chamber: Chamber volume, dimensions and wall thickness
- cooling: Water jacket sizing
- injector: Orifice sizing
- design: The end-to-end pipeline and its request/result types
- geometry: Dimensions handed to the solid modeller
- records: Result persistence sinks
"""
