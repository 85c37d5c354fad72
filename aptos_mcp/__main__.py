from aptos_mcp.scripts.run_server import main

main()
