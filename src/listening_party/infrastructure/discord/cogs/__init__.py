"""
Discord Cogs

- party_cog: announcement listener, /lp status and /lpstart start signal
"""
