from slack_mcp.server import main

main()
